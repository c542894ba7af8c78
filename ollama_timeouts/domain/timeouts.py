"""
Timeout domain values - durations and the named presets.
"""

from __future__ import annotations
import math
import numbers
from datetime import timedelta
from enum import Enum
from typing import Union

from .errors import InvalidTimeoutError


DurationLike = Union[timedelta, int, float]

QUICK_TIMEOUT = timedelta(minutes=2)
STANDARD_TIMEOUT = timedelta(minutes=5)
LONG_TIMEOUT = timedelta(minutes=10)
EXTENDED_TIMEOUT = timedelta(minutes=30)


class TimeoutPreset(Enum):
    """Named timeout presets, ordered from shortest to longest."""
    QUICK = "quick"
    STANDARD = "standard"
    LONG = "long"
    EXTENDED = "extended"

    @property
    def duration(self) -> timedelta:
        return _PRESET_DURATIONS[self]

    @classmethod
    def from_name(cls, name: str) -> TimeoutPreset:
        """Look up a preset by name, ignoring case and surrounding whitespace."""
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown timeout preset {name!r} (expected one of: {valid})") from None


_PRESET_DURATIONS = {
    TimeoutPreset.QUICK: QUICK_TIMEOUT,
    TimeoutPreset.STANDARD: STANDARD_TIMEOUT,
    TimeoutPreset.LONG: LONG_TIMEOUT,
    TimeoutPreset.EXTENDED: EXTENDED_TIMEOUT,
}


def to_timedelta(value: DurationLike) -> timedelta:
    """Coerce a timeout to a strictly positive ``timedelta``.

    Accepts a ``timedelta`` or a real number of seconds. Resolution is one
    microsecond, so positive values below that round to zero and are rejected.

    Raises:
        InvalidTimeoutError: value is None, zero, negative, NaN or infinite, or
            too large to survive conversion to float seconds and back.
        TypeError: value is neither a timedelta nor a real number.
    """
    if value is None:
        raise InvalidTimeoutError("Timeout must be greater than zero, got None.")

    if isinstance(value, timedelta):
        duration = value
    elif isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(
            f"Timeout must be a timedelta or a number of seconds, got {type(value).__name__}"
        )
    else:
        seconds = float(value)
        if not math.isfinite(seconds):
            raise InvalidTimeoutError(f"Timeout must be finite, got {value!r}.")
        try:
            duration = timedelta(seconds=seconds)
        except OverflowError:
            raise InvalidTimeoutError(f"Timeout is out of range: {value!r}.") from None

    if duration <= timedelta(0):
        raise InvalidTimeoutError(f"Timeout must be greater than zero, got {duration}.")

    # httpx stores float seconds; the value must read back unchanged
    try:
        exact = timedelta(seconds=duration.total_seconds()) == duration
    except OverflowError:
        exact = False
    if not exact:
        raise InvalidTimeoutError(
            f"Timeout {duration} cannot be represented exactly in seconds; use a shorter duration."
        )
    return duration
