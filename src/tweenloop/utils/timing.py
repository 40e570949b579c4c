"""
Time helpers

Instants are integer nanoseconds of a monotonic clock (time.monotonic_ns).
Durations are datetime.timedelta. Millisecond conversions truncate
sub-millisecond precision.
"""

import time
from datetime import timedelta
from typing import Callable, Union

Clock = Callable[[], int]

NANOS_PER_MILLI = 1_000_000

DurationLike = Union[timedelta, int, float]


def monotonic_clock() -> int:
    return time.monotonic_ns()


def to_timedelta(value: DurationLike) -> timedelta:
    """Accept a timedelta or plain seconds"""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected timedelta or seconds, got {type(value).__name__}")
    return timedelta(seconds=value)


def to_millis(duration: timedelta) -> int:
    """Whole milliseconds in a duration (seconds * 1000 + truncated sub-second part)"""
    return (duration.days * 86_400 + duration.seconds) * 1_000 + duration.microseconds // 1_000


def to_nanos(duration: timedelta) -> int:
    return ((duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds) * 1_000


def nanos_to_millis(nanos: int) -> int:
    return nanos // NANOS_PER_MILLI
