"""Date helpers for subscription periods."""

from datetime import UTC, datetime, timedelta

ONE_DAY = timedelta(days=1)


def utcnow() -> datetime:
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and normalise aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def past_date(days: int, now: datetime | None = None) -> datetime:
    """Return the instant `days` whole days before now."""
    return (now or utcnow()) - timedelta(days=days)


def elapsed_days(start: datetime, now: datetime) -> int:
    """Whole days from start to now, floored; negative when start is in the future."""
    return (ensure_utc(now) - ensure_utc(start)) // ONE_DAY
