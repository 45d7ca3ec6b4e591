"""Pytest configuration and fixtures."""
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure project root is on path when running pytest from repo root or tests/
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from shuttlebot.clock import REFERENCE_TZ  # noqa: E402


@pytest.fixture
def at():
    """Build an aware datetime in the reference timezone: at(7, 15) or at(7, 15, day=8, month=3)."""

    def _at(hour: int, minute: int, *, year: int = 2026, month: int = 10, day: int = 19) -> datetime:
        return datetime(year, month, day, hour, minute, tzinfo=REFERENCE_TZ)

    return _at
