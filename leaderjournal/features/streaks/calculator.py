"""Pure streak calculation: no I/O, no wall clock.

A streak is a run of consecutive active days. The current streak stays
alive while the most recent active day is today or yesterday.
"""

from datetime import date, datetime, timedelta, tzinfo
from typing import List

from leaderjournal.features.activity.normalizer import active_dates, to_local_date
from leaderjournal.models.activity import ActivityMap
from leaderjournal.models.streak import DayProgress, StreakResult

# Gap (in days) between today and the latest active day that still keeps a streak alive
ALIVE_GAP_DAYS = 1
WEEKLY_PROGRESS_DAYS = 7


def local_today(now: datetime, tz: tzinfo) -> date:
    """Today's calendar date for the caller-supplied instant."""
    return to_local_date(now, tz)


def calculate_streaks(activity: ActivityMap, *, today: date) -> StreakResult:
    """
    Compute current and longest streaks.

    Args:
        activity: Activity map from the normalizer
        today: Calendar date derived from the caller's "now" in the caller's tz

    Returns:
        StreakResult (current_streak, longest_streak, last_active_date)

    Example:
        entries on 2024-01-13, 14 and 15 with today=2024-01-15 -> current 3, longest 3
    """
    dates = active_dates(activity)
    if not dates:
        return StreakResult()

    current = _current_streak(dates, today)
    longest = _longest_streak(dates)

    return StreakResult(
        current_streak=current,
        longest_streak=max(longest, current),
        last_active_date=dates[-1],
    )


def weekly_progress(activity: ActivityMap, *, today: date) -> List[DayProgress]:
    """Last seven calendar days ending today, oldest first."""
    span = min(WEEKLY_PROGRESS_DAYS - 1, (today - date.min).days)
    days = [today - timedelta(days=offset) for offset in range(span, -1, -1)]
    return [
        DayProgress(
            date=day,
            active=day in activity and activity[day].count > 0,
            is_today=day == today,
        )
        for day in days
    ]


def _current_streak(ascending: List[date], today: date) -> int:
    latest = ascending[-1]
    gap = (today - latest).days
    if gap > ALIVE_GAP_DAYS:
        return 0

    streak = 1
    previous = latest
    for day in reversed(ascending[:-1]):
        if (previous - day).days != 1:
            break
        streak += 1
        previous = day
    return streak


def _longest_streak(ascending: List[date]) -> int:
    longest = 0
    run = 0
    previous = None
    for day in ascending:
        if previous is not None and (day - previous).days == 1:
            run += 1
        else:
            longest = max(longest, run)
            run = 1
        previous = day
    return max(longest, run)
