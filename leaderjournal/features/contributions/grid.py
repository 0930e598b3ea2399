"""
leaderjournal/features/contributions/grid.py

GitHub-style contribution grid: one cell per calendar day in a closed range,
bucketed into activity levels. Range-agnostic; arranging cells into week
columns is left to the renderer.
"""

import calendar
from datetime import date, timedelta
from enum import Enum
from typing import List, Tuple

from leaderjournal.core.errors import InvalidRangeError
from leaderjournal.models.activity import ActivityLevel, ActivityMap, ContributionCell, ContributionGrid

# (min_count, level), highest first
LEVEL_THRESHOLDS: Tuple[Tuple[int, ActivityLevel], ...] = (
    (7, ActivityLevel.VERY_HIGH),
    (4, ActivityLevel.HIGH),
    (2, ActivityLevel.MEDIUM),
    (1, ActivityLevel.LOW),
    (0, ActivityLevel.NONE),
)


class GridRange(str, Enum):
    LAST_3_MONTHS = "last_3_months"
    LAST_6_MONTHS = "last_6_months"
    LAST_12_MONTHS = "last_12_months"
    YEAR_TO_DATE = "year_to_date"


_MONTHS_BACK = {
    GridRange.LAST_3_MONTHS: 3,
    GridRange.LAST_6_MONTHS: 6,
    GridRange.LAST_12_MONTHS: 12,
}


def activity_level(count: int) -> ActivityLevel:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    for minimum, level in LEVEL_THRESHOLDS:
        if count >= minimum:
            return level
    return ActivityLevel.NONE


def build_contribution_grid(activity: ActivityMap, *, start: date, end: date) -> ContributionGrid:
    """
    Build the grid for [start, end] inclusive.

    Raises:
        InvalidRangeError: start is after end
    """
    if start > end:
        raise InvalidRangeError(
            f"Invalid contribution range: start {start.isoformat()} is after end {end.isoformat()}"
        )

    cells: List[ContributionCell] = []
    for offset in range((end - start).days + 1):
        day = start + timedelta(days=offset)
        item = activity.get(day)
        count = item.count if item else 0
        cells.append(ContributionCell(date=day, count=count, level=activity_level(count)))

    return ContributionGrid(start=start, end=end, cells=cells)


def resolve_range(preset: GridRange, *, today: date) -> Tuple[date, date]:
    """Inclusive (start, today) for a named range preset."""
    preset = GridRange(preset)
    if preset is GridRange.YEAR_TO_DATE:
        return date(today.year, 1, 1), today
    return _months_before(today, _MONTHS_BACK[preset]), today


def _months_before(day: date, months: int) -> date:
    # Same day-of-month N months back, clamped to the target month's length
    month_index = day.year * 12 + (day.month - 1) - months
    if month_index < 12:
        return date.min
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))
