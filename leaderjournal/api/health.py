"""
Health endpoints for the journal backend.

The streak engine has no dependencies to check, so liveness and readiness
only confirm the process is up and configured.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from leaderjournal.core.config import settings, validate_config

root_router = APIRouter(tags=["health"])


@root_router.get("/healthz")
def healthz():
    """Lightweight liveness check (no deps)."""
    return {"status": "ok"}


@root_router.get("/readyz")
def readyz():
    """Readiness check: streak configuration is valid."""
    return {
        "ok": validate_config(strict=False),
        "timezone": settings.STREAK_TIMEZONE,
        "week_start": settings.STREAK_WEEK_START,
        "computed_at": datetime.now(timezone.utc).isoformat(),
    }
