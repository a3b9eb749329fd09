"""Wall-clock and monotonic time points in nanoseconds, and their text forms."""

from __future__ import annotations

import time

_NS_PER_S = 1000 * 1000 * 1000
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class TimeError(Exception):
    """Raised when a clock reports an unusable time."""


def s_to_ns(seconds: int) -> int:
    """Convert whole seconds to nanoseconds."""
    return seconds * _NS_PER_S


def _checked(now: int) -> int:
    if now < 0:
        raise TimeError("unexpected negative time")
    return now


def system_time_now() -> int:
    """Return the wall-clock time as nanoseconds since the Unix epoch."""
    return _checked(time.time_ns())


def steady_time_now() -> int:
    """Return a monotonic time in nanoseconds, unaffected by clock adjustments."""
    raw_clock = getattr(time, "CLOCK_MONOTONIC_RAW", None)
    clock_gettime_ns = getattr(time, "clock_gettime_ns", None)
    if raw_clock is not None and clock_gettime_ns is not None:
        return _checked(clock_gettime_ns(raw_clock))
    return _checked(time.monotonic_ns())


def _check_time_point(time_point: int) -> None:
    if isinstance(time_point, bool) or not isinstance(time_point, int):
        raise TypeError("time point must be an integer")
    if not _INT64_MIN <= time_point <= _INT64_MAX:
        raise ValueError("time point out of the signed 64-bit range")


def as_nanoseconds_string(time_point: int) -> str:
    """Format a time point as nanoseconds, zero-padded to at least 19 digits."""
    _check_time_point(time_point)
    return "%.19d" % time_point


def as_seconds_string(time_point: int) -> str:
    """Format a time point as seconds with nine decimals.

    The whole seconds are zero-padded to at least ten digits; negative
    time points carry a leading minus sign.
    """
    _check_time_point(time_point)
    seconds, nanoseconds = divmod(abs(time_point), _NS_PER_S)
    sign = "" if time_point >= 0 else "-"
    return "%s%.10d.%.9d" % (sign, seconds, nanoseconds)