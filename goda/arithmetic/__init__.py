"""Temporal arithmetic helpers.

This module provides:
    - Chainable arithmetic that keeps the first error raised
    - Comparison helpers over any goda value

Chain Types (from goda.arithmetic.chain):
    - LocalDateChain, LocalTimeChain, LocalDateTimeChain
    - OffsetDateTimeChain, YearMonthChain

Comparison Operations (from goda.arithmetic.comparisons):
    - compare: Return -1, 0, or 1 for comparison
    - min_value, max_value: Find extremes
    - clamp: Constrain value to range
"""

from __future__ import annotations

from goda.arithmetic.chain import (
    Chain,
    LocalDateChain,
    LocalDateTimeChain,
    LocalTimeChain,
    OffsetDateTimeChain,
    YearMonthChain,
)
from goda.arithmetic.comparisons import clamp, compare, max_value, min_value

__all__ = [
    # Chains
    "Chain",
    "LocalDateChain",
    "LocalTimeChain",
    "LocalDateTimeChain",
    "OffsetDateTimeChain",
    "YearMonthChain",
    # Comparison operations
    "compare",
    "min_value",
    "max_value",
    "clamp",
]
