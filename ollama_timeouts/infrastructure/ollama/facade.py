"""
Timeout facade - get, set and configure the request timeout of an ollama client.

The functions borrow a caller-owned client, touch only the ``timeout`` of its
httpx transport, and return the very same client so calls can be chained:

    client = set_timeout(ollama.Client(host='http://localhost:11434'), timedelta(minutes=10))
    with_long_timeout(client)
    configure_timeout(client, lambda current: current * 2 if current else timedelta(minutes=5))
"""

from __future__ import annotations
import logging
from datetime import timedelta
from typing import Any, Callable, Optional, TypeVar

import httpx

from ...domain.errors import NullClientError, NullTransformError
from ...domain.timeouts import (
    DurationLike,
    TimeoutPreset,
    QUICK_TIMEOUT,
    STANDARD_TIMEOUT,
    LONG_TIMEOUT,
    EXTENDED_TIMEOUT,
    to_timedelta,
)
from .transport import find_transport, require_transport


logger = logging.getLogger(__name__)

ClientT = TypeVar('ClientT')
TimeoutTransform = Callable[[Optional[timedelta]], DurationLike]


def _ensure_client(client: Any) -> None:
    if client is None:
        raise NullClientError("client must not be None")


def set_timeout(client: ClientT, timeout: DurationLike) -> ClientT:
    """Set the timeout of the client's underlying httpx client.

    The value applies to every phase (connect, read, write, pool) and replaces
    any previous timeout. Useful for long generations that outlive the default.

    Args:
        client: An ``ollama.Client`` / ``ollama.AsyncClient`` (or compatible).
        timeout: ``timedelta`` or seconds; must be strictly positive.

    Returns:
        The same client instance, for chaining.

    Raises:
        NullClientError: client is None.
        InvalidTimeoutError: timeout is not strictly positive and finite, or
            too large to store as float seconds without loss.
        TransportUnavailableError: the internal httpx client is missing.
    """
    _ensure_client(client)
    duration = to_timedelta(timeout)
    transport = require_transport(client)

    transport.timeout = httpx.Timeout(duration.total_seconds())
    logger.debug(f"Timeout for {type(client).__name__} set to {duration}")
    return client


def get_timeout(client: Any) -> Optional[timedelta]:
    """Return the client's current read timeout.

    Returns None when the transport cannot be inspected, has no read
    timeout, or holds a value too large for a timedelta. Only a None
    client raises.
    """
    _ensure_client(client)
    transport = find_transport(client)
    if transport is None:
        return None

    read = transport.timeout.read
    if read is None:
        return None
    try:
        return timedelta(seconds=read)
    except (OverflowError, ValueError):
        logger.debug(f"Read timeout {read!r} of {type(client).__name__} is out of range")
        return None


def configure_timeout(client: ClientT, transform: TimeoutTransform) -> ClientT:
    """Compute a new timeout from the current one and apply it.

    ``transform`` receives the current timeout (None if unknown) and returns
    the new one. Whatever ``set_timeout`` raises for that value propagates.

    Example:
        # Double the current timeout, or use 5 minutes when there is none
        configure_timeout(client, lambda current: current * 2 if current else timedelta(minutes=5))
    """
    _ensure_client(client)
    if transform is None:
        raise NullTransformError("transform must not be None")
    if not callable(transform):
        raise TypeError(f"transform must be callable, got {type(transform).__name__}")

    current = get_timeout(client)
    return set_timeout(client, transform(current))


def with_quick_timeout(client: ClientT) -> ClientT:
    """Timeout suitable for quick queries (2 minutes)."""
    return set_timeout(client, QUICK_TIMEOUT)


def with_standard_timeout(client: ClientT) -> ClientT:
    """Timeout suitable for standard prompts (5 minutes)."""
    return set_timeout(client, STANDARD_TIMEOUT)


def with_long_timeout(client: ClientT) -> ClientT:
    """Timeout suitable for long-form generation (10 minutes)."""
    return set_timeout(client, LONG_TIMEOUT)


def with_extended_timeout(client: ClientT) -> ClientT:
    """Timeout suitable for very large models or slow hardware (30 minutes)."""
    return set_timeout(client, EXTENDED_TIMEOUT)


_PRESET_HELPERS = {
    TimeoutPreset.QUICK: with_quick_timeout,
    TimeoutPreset.STANDARD: with_standard_timeout,
    TimeoutPreset.LONG: with_long_timeout,
    TimeoutPreset.EXTENDED: with_extended_timeout,
}


def apply_preset(client: ClientT, preset: TimeoutPreset | str) -> ClientT:
    """Apply a preset given as a TimeoutPreset or its name."""
    if not isinstance(preset, TimeoutPreset):
        preset = TimeoutPreset.from_name(preset)
    return _PRESET_HELPERS[preset](client)
