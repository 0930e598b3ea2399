"""
leaderjournal/features/activity/normalizer.py

Collapses raw entry timestamps into a per-calendar-day activity map.
Pure: (entries, tz) -> NormalizationResult. One tz for the whole call.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, timezone, tzinfo
from typing import Any, Iterable, List, Mapping, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from leaderjournal.core.errors import UnknownTimezoneError
from leaderjournal.core.logging import log_event
from leaderjournal.models.activity import ActivityDay, ActivityMap, SkippedEntry

TIMESTAMP_KEYS = ("created_at", "createdAt")

MISSING_TIMESTAMP = "missing_timestamp"
UNPARSEABLE_TIMESTAMP = "unparseable_timestamp"
UNSUPPORTED_TYPE = "unsupported_type"
OUT_OF_RANGE_TIMESTAMP = "out_of_range_timestamp"


class _SkipEntry(Exception):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


@dataclass
class NormalizationResult:
    activity: ActivityMap = field(default_factory=dict)
    skipped: List[SkippedEntry] = field(default_factory=list)


def resolve_timezone(name: str) -> ZoneInfo:
    """Turn an IANA name ("Europe/London") into a tzinfo."""
    if not name or not name.strip():
        raise UnknownTimezoneError("timezone name is required")
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownTimezoneError(f"Unknown timezone: {name!r}") from e


def to_local_date(moment: datetime, tz: tzinfo) -> date:
    """Calendar date of an instant in tz. Naive instants are UTC."""
    aware = moment if moment.tzinfo else moment.replace(tzinfo=timezone.utc)
    return aware.astimezone(tz).date()


def normalize_entries(entries: Iterable[Any], *, tz: tzinfo) -> NormalizationResult:
    """
    Bucket entries by the calendar date of their creation instant in tz.

    Args:
        entries: datetimes, ISO-8601 strings (a bare YYYY-MM-DD is taken as a
            local date), mappings with created_at/createdAt, or objects with a
            created_at attribute. Any order.
        tz: Timezone applied uniformly to every entry

    Returns:
        NormalizationResult with the activity map and any skipped entries
    """
    counts: Counter = Counter()
    skipped: List[SkippedEntry] = []

    for index, entry in enumerate(entries):
        try:
            day = _entry_date(entry, tz)
        except _SkipEntry as skip:
            skipped.append(SkippedEntry(index=index, raw=_short_repr(entry), reason=skip.reason))
            log_event(
                "warning",
                "activity.entry_skipped",
                event_type="activity.entry_skipped",
                extra={"index": index, "reason": skip.reason},
            )
            continue
        counts[day] += 1

    activity: ActivityMap = {day: ActivityDay(date=day, count=n) for day, n in counts.items()}
    return NormalizationResult(activity=activity, skipped=skipped)


def active_dates(activity: ActivityMap) -> List[date]:
    """Dates with at least one entry, ascending."""
    return sorted(day for day, item in activity.items() if item.count > 0)


def _entry_date(entry: Any, tz: tzinfo) -> date:
    moment = _extract_timestamp(entry)
    # Bare calendar dates ("2024-01-15") are already local days
    if not isinstance(moment, datetime):
        return moment
    try:
        return to_local_date(moment, tz)
    except OverflowError:
        raise _SkipEntry(OUT_OF_RANGE_TIMESTAMP) from None


def _extract_timestamp(entry: Any) -> Union[datetime, date]:
    raw: Optional[Any]
    if isinstance(entry, (datetime, str)):
        raw = entry
    elif isinstance(entry, Mapping):
        raw = next((entry[key] for key in TIMESTAMP_KEYS if entry.get(key) is not None), None)
    elif hasattr(entry, "created_at"):
        raw = getattr(entry, "created_at")
    else:
        raise _SkipEntry(UNSUPPORTED_TYPE)

    if raw is None:
        raise _SkipEntry(MISSING_TIMESTAMP)
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str):
        return _parse_iso(raw)
    raise _SkipEntry(UNSUPPORTED_TYPE)


def _parse_iso(value: str) -> Union[datetime, date]:
    text = value.strip()
    if not text:
        raise _SkipEntry(MISSING_TIMESTAMP)
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text)
    except ValueError:
        raise _SkipEntry(UNPARSEABLE_TIMESTAMP) from None


def _short_repr(value: Any, limit: int = 120) -> str:
    text = repr(value)
    if len(text) <= limit:
        return text
    return text[:limit] + "...<truncated>"
