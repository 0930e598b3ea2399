# leaderjournal/conftest.py
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add repository root to PYTHONPATH so `leaderjournal.*` imports resolve
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def fixed_now():
    """Fixed reference instant for deterministic streak math (a Monday)."""
    return datetime(2024, 1, 15, 18, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def utc():
    return timezone.utc


@pytest.fixture
def stamp():
    """Build an ISO timestamp for a UTC calendar day at noon."""

    def _stamp(year: int, month: int, day: int, hour: int = 12) -> str:
        return datetime(year, month, day, hour, 0, tzinfo=timezone.utc).isoformat()

    return _stamp
