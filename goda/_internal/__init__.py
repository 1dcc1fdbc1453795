"""Internal utilities for Goda.

This module contains private implementation details:
    - Constants and magic numbers
    - Floor/truncating division and int64 overflow checks
    - Proleptic-Gregorian calendar algorithms
    - Field-range validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from goda._internal.arith import add_exact, floor_div, floor_mod, mul_exact
from goda._internal.validation import check_field, validate_fields

__all__: list[str] = [
    "add_exact",
    "check_field",
    "floor_div",
    "floor_mod",
    "mul_exact",
    "validate_fields",
]
