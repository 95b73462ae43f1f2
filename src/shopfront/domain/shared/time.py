"""Time helpers shared by the domain layer.

Timestamps are stored and compared in UTC. Reports bucket them into
calendar days of a configurable timezone.
"""

from datetime import datetime, timezone, tzinfo


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Treat naive datetimes (e.g. read back from SQLite) as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def local_day(dt: datetime, tz: tzinfo) -> str:
    """ISO calendar day (YYYY-MM-DD) of ``dt`` in ``tz``."""
    return ensure_tz_aware(dt).astimezone(tz).date().isoformat()
