"""Pytest configuration and fixtures for Goda tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so goda can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def clear_zone_cache():
    """Empty the process-wide zone cache around a test."""
    from goda.core import zone_id

    zone_id._location_cache.clear()
    yield zone_id._location_cache
    zone_id._location_cache.clear()
