"""Clock sources and current-time encoding helpers.

A clock is any zero-argument callable returning a TimeValue.
"""

from __future__ import annotations

import time
from datetime import datetime
from typing import Callable

from timehash.codec import hash_time
from timehash.precision import MILLIS, Precision
from timehash.types import TimeValue

Clock = Callable[[], TimeValue]


def system_utc() -> TimeValue:
    """Current UTC wall-clock time."""
    return TimeValue.from_epoch_nanos(time.time_ns())


def fixed(value: TimeValue | datetime) -> Clock:
    """Clock that always returns the same value. Useful in tests."""
    if isinstance(value, datetime):
        value = TimeValue.from_datetime(value)

    def _clock() -> TimeValue:
        return value

    return _clock


def hash_now(clock: Clock, precision: Precision) -> str:
    """Encode the clock's current time with the given precision."""
    return hash_time(clock(), precision)


def hash_millis(clock: Clock) -> str:
    """Encode the clock's current time with millisecond precision."""
    return hash_now(clock, MILLIS)


def utc_now_millis() -> str:
    """Encode the current UTC time with millisecond precision."""
    return hash_millis(system_utc)
