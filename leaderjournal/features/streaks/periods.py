"""
Period aggregation: distinct active dates in the current week, the current
calendar month, and all time.
"""

import calendar
from datetime import date, timedelta
from enum import Enum
from typing import Tuple

from leaderjournal.features.activity.normalizer import active_dates
from leaderjournal.models.activity import ActivityMap
from leaderjournal.models.streak import PeriodCounts


class WeekStart(str, Enum):
    """Which days make up "this week"."""

    MONDAY = "monday"
    SUNDAY = "sunday"
    ROLLING_7_DAYS = "rolling_7_days"  # today and the six days before it


def week_window(today: date, week_start: WeekStart) -> Tuple[date, date]:
    """Inclusive (start, end) window for the week containing today.

    Calendar conventions cover the full seven-day week; the rolling window
    ends today.
    """
    week_start = WeekStart(week_start)
    if week_start is WeekStart.ROLLING_7_DAYS:
        return _shift(today, -6), today
    if week_start is WeekStart.MONDAY:
        offset = today.weekday()
    else:
        offset = (today.weekday() + 1) % 7
    start = _shift(today, -offset)
    return start, _shift(start, 6)


def _shift(day: date, days: int) -> date:
    # Clamped to the representable calendar
    if days < 0:
        return day - timedelta(days=min(-days, (day - date.min).days))
    return day + timedelta(days=min(days, (date.max - day).days))


def month_window(today: date) -> Tuple[date, date]:
    """Whole calendar month containing today."""
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


def aggregate_periods(activity: ActivityMap, *, today: date, week_start: WeekStart) -> PeriodCounts:
    """
    Count distinct active dates per period.

    Args:
        activity: Activity map from the normalizer
        today: Calendar date derived from the caller's "now"
        week_start: Week convention (no implicit default)

    Returns:
        PeriodCounts
    """
    dates = active_dates(activity)
    week_from, week_to = week_window(today, week_start)
    month_from, month_to = month_window(today)

    return PeriodCounts(
        entries_this_week=sum(1 for d in dates if week_from <= d <= week_to),
        entries_this_month=sum(1 for d in dates if month_from <= d <= month_to),
        total_active_days=len(dates),
    )
