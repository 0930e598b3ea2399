import logging

from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import Optional

from leaderjournal.core.logging import LOGGER_NAME
from leaderjournal.features.activity.normalizer import resolve_timezone
from leaderjournal.features.contributions.grid import GridRange
from leaderjournal.features.streaks.motivation import MotivationTable
from leaderjournal.features.streaks.periods import WeekStart

# Week convention used when the deployment does not set STREAK_WEEK_START
DEFAULT_WEEK_START = WeekStart.MONDAY
DEFAULT_TIMEZONE = "UTC"
DEFAULT_GRID_RANGE = GridRange.LAST_3_MONTHS


class Settings(BaseSettings):
    # Environment
    ENV: str = "development"
    CONFIG_STRICT: bool = False

    # Streak engine
    STREAK_TIMEZONE: str = DEFAULT_TIMEZONE  # IANA name, e.g. "America/New_York"
    STREAK_WEEK_START: str = DEFAULT_WEEK_START.value  # monday | sunday | rolling_7_days
    GRID_DEFAULT_RANGE: str = DEFAULT_GRID_RANGE.value
    GRID_MAX_DAYS: int = 1100  # widest explicit start/end span the API will build
    MOTIVATION_TIERS: Optional[str] = None  # JSON: [[0, "Start"], [1, "Day one"], ...]

    # App URLs
    FRONTEND_ORIGIN: str = "http://localhost:3000"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
settings = Settings()


def validate_config(strict: Optional[bool] = None, settings_obj: Optional[Settings] = None, logger: Optional[logging.Logger] = None) -> bool:
    """Validate streak engine configuration.

    In strict mode raise RuntimeError; otherwise emit warnings only.
    """
    cfg = settings_obj or settings
    log = logger or logging.getLogger(LOGGER_NAME)
    strict_mode = strict if strict is not None else getattr(cfg, "CONFIG_STRICT", False)

    problems = []
    try:
        resolve_timezone(cfg.STREAK_TIMEZONE)
    except ValueError as e:
        problems.append(f"STREAK_TIMEZONE: {e}")
    try:
        WeekStart(cfg.STREAK_WEEK_START)
    except ValueError:
        problems.append(f"STREAK_WEEK_START: unsupported value {cfg.STREAK_WEEK_START!r}")
    try:
        GridRange(cfg.GRID_DEFAULT_RANGE)
    except ValueError:
        problems.append(f"GRID_DEFAULT_RANGE: unsupported value {cfg.GRID_DEFAULT_RANGE!r}")
    if cfg.MOTIVATION_TIERS:
        try:
            MotivationTable.from_json(cfg.MOTIVATION_TIERS)
        except ValueError as e:
            problems.append(f"MOTIVATION_TIERS: {e}")

    if problems:
        message = f"Invalid configuration: {'; '.join(problems)}"
        if strict_mode:
            raise RuntimeError(message)
        log.warning(message)
        return False

    return True
