"""Pytest configuration and fixtures for isoperiod tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so isoperiod can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from isoperiod import Period  # noqa: E402


@pytest.fixture
def full_period() -> Period:
    """1 year, 2 months, 3 weeks, 4 days, 5 hours, 6 minutes, 7.5 seconds."""
    return Period(years=1, months=2, weeks=3, days=4, hours=5, minutes=6, seconds="7.5")
