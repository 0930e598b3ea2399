"""
Streak Engine

Runs the normalizer once and feeds the same activity map, tz and "today"
to the streak calculator, period aggregator and contribution grid builder.
"""

from datetime import date, datetime, tzinfo
from typing import Any, Iterable

from leaderjournal.features.activity.normalizer import normalize_entries, resolve_timezone
from leaderjournal.features.contributions.grid import GridRange, build_contribution_grid, resolve_range
from leaderjournal.features.streaks.calculator import calculate_streaks, local_today, weekly_progress
from leaderjournal.features.streaks.motivation import DEFAULT_MOTIVATION_TABLE, MotivationTable, select_message
from leaderjournal.features.streaks.periods import WeekStart, aggregate_periods
from leaderjournal.models.activity import ContributionGrid
from leaderjournal.models.streak import StreakReport, StreakSnapshot


class StreakEngine:
    """Stateless; safe to share across requests."""

    def __init__(
        self,
        *,
        tz: tzinfo,
        week_start: WeekStart,
        motivation_table: MotivationTable = DEFAULT_MOTIVATION_TABLE,
    ):
        self.tz = tz
        self.week_start = WeekStart(week_start)
        self.motivation_table = motivation_table

    @classmethod
    def from_settings(cls, settings_obj, *, timezone_name: str | None = None, week_start: str | None = None) -> "StreakEngine":
        """
        Build an engine from Settings, with optional per-request overrides.

        Raises:
            UnknownTimezoneError: timezone name is not a known IANA zone
            ValueError: week start or motivation tiers are invalid
        """
        tiers = getattr(settings_obj, "MOTIVATION_TIERS", None)
        return cls(
            tz=resolve_timezone(timezone_name or settings_obj.STREAK_TIMEZONE),
            week_start=WeekStart(week_start or settings_obj.STREAK_WEEK_START),
            motivation_table=MotivationTable.from_json(tiers) if tiers else DEFAULT_MOTIVATION_TABLE,
        )

    def build_snapshot(self, entries: Iterable[Any], *, now: datetime) -> StreakReport:
        """
        Compute the streak card for one user.

        Args:
            entries: Entry timestamps (any shape the normalizer accepts)
            now: Reference instant supplied by the caller

        Returns:
            StreakReport with snapshot, motivation, weekly progress and skipped entries
        """
        normalized = normalize_entries(entries, tz=self.tz)
        today = local_today(now, self.tz)

        streaks = calculate_streaks(normalized.activity, today=today)
        periods = aggregate_periods(normalized.activity, today=today, week_start=self.week_start)

        snapshot = StreakSnapshot(
            current_streak=streaks.current_streak,
            longest_streak=streaks.longest_streak,
            total_active_days=periods.total_active_days,
            entries_this_week=periods.entries_this_week,
            entries_this_month=periods.entries_this_month,
            last_active_date=streaks.last_active_date,
        )
        return StreakReport(
            snapshot=snapshot,
            motivation=select_message(snapshot.current_streak, self.motivation_table),
            weekly_progress=weekly_progress(normalized.activity, today=today),
            skipped=normalized.skipped,
        )

    def build_grid(self, entries: Iterable[Any], *, start: date, end: date) -> ContributionGrid:
        normalized = normalize_entries(entries, tz=self.tz)
        return build_contribution_grid(normalized.activity, start=start, end=end)

    def build_grid_for_preset(self, entries: Iterable[Any], *, preset: GridRange, now: datetime) -> ContributionGrid:
        start, end = resolve_range(preset, today=local_today(now, self.tz))
        return self.build_grid(entries, start=start, end=end)
