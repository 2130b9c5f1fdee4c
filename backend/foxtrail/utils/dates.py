"""Timestamp helpers."""

import uuid
from datetime import UTC, datetime, timedelta


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def next_timestamp(previous: datetime) -> datetime:
    """Current time, nudged past ``previous`` if the clock has not advanced."""
    now = utcnow()
    if now > previous:
        return now
    return previous + timedelta(microseconds=1)


def start_of_day(moment: datetime) -> datetime:
    """Midnight of the given moment's day, same timezone."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(moment: datetime) -> datetime:
    """Last microsecond of the given moment's day, same timezone."""
    return moment.replace(hour=23, minute=59, second=59, microsecond=999999)


def new_id() -> str:
    """Issue a fresh opaque identifier."""
    return str(uuid.uuid4())
