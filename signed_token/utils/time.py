"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from ..errors import InvalidArgumentError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def require_aware(value: datetime, name: str) -> datetime:
    """Return ``value`` unchanged, rejecting naive datetimes."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidArgumentError(f"{name} must be a timezone-aware datetime")
    return value


def to_epoch_ms(value: datetime) -> int:
    """Return whole milliseconds since the epoch, flooring sub-millisecond parts."""
    return (value - EPOCH) // _ONE_MS


def from_epoch_ms(value: int) -> datetime:
    """Return an aware UTC datetime for milliseconds since the epoch."""
    return EPOCH + timedelta(milliseconds=value)


def truncate_to_ms(value: datetime) -> datetime:
    """Drop sub-millisecond precision and normalize to UTC."""
    return from_epoch_ms(to_epoch_ms(value))
