from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from leaderjournal.models.activity import SkippedEntry


@dataclass(frozen=True)
class StreakResult:
    """
    Current and longest run of consecutive active days. Day-level, tz already applied.
    """

    current_streak: int = 0
    longest_streak: int = 0
    last_active_date: Optional[date] = None


@dataclass(frozen=True)
class PeriodCounts:
    entries_this_week: int = 0
    entries_this_month: int = 0
    total_active_days: int = 0


class StreakSnapshot(BaseModel):
    """Combined streak and period statistics for one computation."""

    model_config = ConfigDict(frozen=True)

    current_streak: int = Field(ge=0)
    longest_streak: int = Field(ge=0)
    total_active_days: int = Field(ge=0, description="Distinct dates with at least one entry")
    entries_this_week: int = Field(ge=0, description="Distinct active dates in the week window")
    entries_this_month: int = Field(ge=0, description="Distinct active dates in the calendar month")
    last_active_date: Optional[date] = None

    @model_validator(mode="after")
    def _longest_covers_current(self) -> "StreakSnapshot":
        if self.longest_streak < self.current_streak:
            raise ValueError(
                f"longest_streak ({self.longest_streak}) < current_streak ({self.current_streak})"
            )
        return self


class DayProgress(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    active: bool
    is_today: bool


class StreakReport(BaseModel):
    """Everything the journal dashboard renders for the streak card."""

    model_config = ConfigDict(frozen=True)

    snapshot: StreakSnapshot
    motivation: str
    weekly_progress: List[DayProgress] = Field(description="Last 7 days ending today, oldest first")
    skipped: List[SkippedEntry] = Field(default_factory=list)
