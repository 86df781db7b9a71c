from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date '{value}' (expected YYYY-MM-DD)")


def parse_iso_datetime(value: str, *, work_date: date | None = None, tz_name: str | None = None) -> datetime:
    """Parse a check-in/out timestamp into naive local wall-clock time.

    Accepts full ISO timestamps ('2024-05-01 09:00:00', '2024-05-01T09:00') or a
    bare time ('09:00', '09:00:00') combined with ``work_date``. An explicit
    UTC offset is converted to ``tz_name`` before it is dropped.
    """
    v = str(value or "").strip()
    if not v:
        raise ValidationError("Timestamp is required")

    try:
        parsed = datetime.fromisoformat(v)
    except ValueError:
        parsed = None

    if parsed is not None:
        if parsed.tzinfo is not None and tz_name:
            parsed = parsed.astimezone(ZoneInfo(tz_name))
        return parsed.replace(tzinfo=None)

    if work_date is not None:
        for fmt in ("%H:%M:%S", "%H:%M"):
            try:
                return datetime.combine(work_date, datetime.strptime(v, fmt).time())
            except ValueError:
                continue

    raise ValidationError(f"Invalid timestamp '{value}'")


def now_local(tz_name: str) -> datetime:
    """Current wall-clock time in the configured timezone, returned naive.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)


def today_local(tz_name: str) -> date:
    return now_local(tz_name).date()
