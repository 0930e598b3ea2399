"""
leaderjournal/models/activity.py
Activity models: ActivityDay, ContributionCell, ContributionGrid.
Ephemeral read models, recomputed on every request and never persisted.
"""

from datetime import date
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ActivityLevel(str, Enum):
    """Heat-map bucket for a single day's entry count."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


class ActivityDay(BaseModel):
    """Entries written on one calendar date."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = Field(ge=0, description="Entries whose timestamp falls on this date")


# One ActivityDay per distinct calendar date
ActivityMap = Dict[date, ActivityDay]


class SkippedEntry(BaseModel):
    """An input entry that could not be placed on a calendar date."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Position in the caller's entry list")
    raw: str = Field(description="Truncated repr of the offending value")
    reason: str = Field(
        description="missing_timestamp | unparseable_timestamp | unsupported_type | out_of_range_timestamp"
    )


class ContributionCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    count: int = Field(ge=0)
    level: ActivityLevel


class ContributionGrid(BaseModel):
    """Every calendar day in [start, end], oldest first, no gaps."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date
    cells: List[ContributionCell]

    @computed_field
    @property
    def total_entries(self) -> int:
        return sum(cell.count for cell in self.cells)

    @computed_field
    @property
    def active_days(self) -> int:
        return sum(1 for cell in self.cells if cell.count > 0)
