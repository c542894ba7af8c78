"""
Timeout configuration errors.

Each error also derives from the builtin exception a caller would naturally
expect, so ``except ValueError`` keeps working for invalid durations.
"""


class TimeoutConfigurationError(Exception):
    """Base class for all timeout configuration failures."""
    pass


class NullClientError(TimeoutConfigurationError, TypeError):
    """Raised when the client argument is None."""
    pass


class InvalidTimeoutError(TimeoutConfigurationError, ValueError):
    """Raised when a timeout is not a strictly positive, finite duration."""
    pass


class NullTransformError(TimeoutConfigurationError, TypeError):
    """Raised when configure_timeout receives no transform."""
    pass


class TransportUnavailableError(TimeoutConfigurationError, RuntimeError):
    """Raised when the client's internal HTTP transport cannot be located.

    Signals that the wrapped ollama client no longer stores an httpx client
    where this package expects it. Not retryable.
    """
    pass
