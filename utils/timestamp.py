"""Timestamp utilities: clocks, ISO formatting and Unix conversions."""

import time
from datetime import datetime, timedelta, timezone

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_SECOND = timedelta(seconds=1)
_MILLISECOND = timedelta(milliseconds=1)


def now_seconds():
    """Current time in whole seconds since Unix epoch."""
    return time.time_ns() // 1_000_000_000


def now_millis():
    """Current time in milliseconds since Unix epoch."""
    return time.time_ns() // 1_000_000


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return time.time_ns() // 1_000


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = UNIX_EPOCH + timedelta(microseconds=epoch_us)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"


def _as_utc(dt):
    # Naive datetimes are read as UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def to_unix_seconds(dt):
    """Whole seconds since Unix epoch, rounded down."""
    return (_as_utc(dt) - UNIX_EPOCH) // _SECOND


def to_unix_millis(dt):
    """Milliseconds since Unix epoch, rounded down."""
    return (_as_utc(dt) - UNIX_EPOCH) // _MILLISECOND


def from_unix_seconds(seconds):
    return UNIX_EPOCH + timedelta(seconds=seconds)


def from_unix_millis(millis):
    return UNIX_EPOCH + timedelta(milliseconds=millis)
