"""
Transport lookup for ollama clients.

``ollama.Client`` keeps its ``httpx.Client`` in the ``_client`` attribute and
does not expose it publicly. The timeout helpers read and write the
``timeout`` property of that object, so the lookup lives here in one place.
"""

from __future__ import annotations
import logging
from typing import Any, Optional, Union

import httpx

from ...domain.errors import TransportUnavailableError


logger = logging.getLogger(__name__)

TRANSPORT_ATTRIBUTE = '_client'

Transport = Union[httpx.Client, httpx.AsyncClient]


def find_transport(client: Any) -> Optional[Transport]:
    """Return the client's httpx transport, or None if it cannot be located."""
    transport = getattr(client, TRANSPORT_ATTRIBUTE, None)
    if isinstance(transport, (httpx.Client, httpx.AsyncClient)):
        return transport
    logger.debug(
        f"No httpx transport on {type(client).__name__}.{TRANSPORT_ATTRIBUTE} "
        f"(found {type(transport).__name__})"
    )
    return None


def require_transport(client: Any) -> Transport:
    """Return the client's httpx transport or raise TransportUnavailableError."""
    transport = find_transport(client)
    if transport is None:
        client_type = type(client).__name__
        logger.warning(f"Unable to access the internal HTTP client of {client_type}")
        raise TransportUnavailableError(
            f"Unable to access the internal HTTP client of {client_type}. "
            "The ollama library structure may have changed."
        )
    return transport
