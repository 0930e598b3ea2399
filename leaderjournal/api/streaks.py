"""
Streak API Endpoints

POST /v1/streaks/snapshot — streak card (current/longest streak, period counts, motivation)
POST /v1/streaks/contributions — contribution grid for a date range or preset

This is the edge where the real clock is read when the caller omits "now".
"""

import logging
from datetime import date, datetime, timezone
from typing import Any, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from leaderjournal.core.config import settings
from leaderjournal.core.errors import ValidationError
from leaderjournal.core.logging import LOGGER_NAME
from leaderjournal.features.contributions.grid import GridRange
from leaderjournal.features.streaks.periods import WeekStart
from leaderjournal.features.streaks.service import StreakEngine

logger = logging.getLogger(LOGGER_NAME)

router = APIRouter(prefix="/v1/streaks", tags=["streaks"])


class SnapshotRequest(BaseModel):
    entries: List[Any] = Field(..., description="Entry timestamps or {created_at} objects")
    now: Optional[datetime] = None
    timezone: Optional[str] = Field(default=None, description="IANA timezone, defaults to STREAK_TIMEZONE")
    week_start: Optional[WeekStart] = None


class ContributionsRequest(BaseModel):
    entries: List[Any] = Field(..., description="Entry timestamps or {created_at} objects")
    start: Optional[date] = None
    end: Optional[date] = None
    range: Optional[GridRange] = Field(default=None, description="Preset used when start/end are omitted")
    now: Optional[datetime] = None
    timezone: Optional[str] = None


@router.post("/snapshot")
def post_snapshot(request: SnapshotRequest) -> dict:
    """
    Compute the streak card.

    Returns:
        {
            "data": {
                "snapshot": {"current_streak": 3, "longest_streak": 5, ...},
                "motivation": "3 days strong! Building momentum 🔥",
                "weekly_progress": [{"date": "2024-01-09", "active": false, "is_today": false}, ...]
            },
            "skipped": [{"index": 2, "raw": "'not-a-date'", "reason": "unparseable_timestamp"}]
        }
    """
    engine = StreakEngine.from_settings(
        settings,
        timezone_name=request.timezone,
        week_start=request.week_start.value if request.week_start else None,
    )
    report = engine.build_snapshot(request.entries, now=_normalize(request.now))
    logger.info(
        "streaks.snapshot",
        extra={
            "entries": len(request.entries),
            "skipped": len(report.skipped),
            "current_streak": report.snapshot.current_streak,
        },
    )
    body = report.model_dump(mode="json")
    skipped = body.pop("skipped")
    return {"data": body, "skipped": skipped}


@router.post("/contributions")
def post_contributions(request: ContributionsRequest) -> dict:
    """Contribution grid for an explicit [start, end] or a named range."""
    engine = StreakEngine.from_settings(settings, timezone_name=request.timezone)

    if request.start is not None or request.end is not None:
        if request.start is None or request.end is None:
            raise ValidationError("start and end must be provided together")
        if request.range is not None:
            raise ValidationError("use either start/end or range, not both")
        span_days = (request.end - request.start).days + 1
        if span_days > settings.GRID_MAX_DAYS:
            raise ValidationError(
                f"contribution range spans {span_days} days; the maximum is {settings.GRID_MAX_DAYS}"
            )
        grid = engine.build_grid(request.entries, start=request.start, end=request.end)
    else:
        preset = request.range or GridRange(settings.GRID_DEFAULT_RANGE)
        grid = engine.build_grid_for_preset(request.entries, preset=preset, now=_normalize(request.now))

    return {"data": grid.model_dump(mode="json")}


def _normalize(moment: Optional[datetime]) -> datetime:
    if moment is None:
        return datetime.now(timezone.utc)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
