"""Wall-clock timestamp utilities."""

import time
from datetime import datetime, timezone


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return time.time_ns() // 1_000


def now_millis():
    """Current time in milliseconds since Unix epoch."""
    return time.time_ns() // 1_000_000


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()
    
    seconds, micros = divmod(epoch_us, 1_000_000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=micros)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"


def millis_to_datetime(epoch_ms):
    """UTC datetime for a millisecond timestamp, exact to the millisecond."""
    seconds, millis = divmod(epoch_ms, 1000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return dt.replace(microsecond=millis * 1000)


def format_millis(epoch_ms):
    """Format a millisecond timestamp as ISO 8601, e.g. 4199-11-24T01:22:57.663Z."""
    dt = millis_to_datetime(epoch_ms)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
