"""Domain layer - timeout values and errors, no third-party dependencies."""

from .errors import (
    TimeoutConfigurationError,
    NullClientError,
    InvalidTimeoutError,
    NullTransformError,
    TransportUnavailableError,
)
from .timeouts import (
    DurationLike,
    TimeoutPreset,
    QUICK_TIMEOUT,
    STANDARD_TIMEOUT,
    LONG_TIMEOUT,
    EXTENDED_TIMEOUT,
    to_timedelta,
)

__all__ = [
    "TimeoutConfigurationError",
    "NullClientError",
    "InvalidTimeoutError",
    "NullTransformError",
    "TransportUnavailableError",
    "DurationLike",
    "TimeoutPreset",
    "QUICK_TIMEOUT",
    "STANDARD_TIMEOUT",
    "LONG_TIMEOUT",
    "EXTENDED_TIMEOUT",
    "to_timedelta",
]
