"""Ollama infrastructure package."""

from .client import AsyncOllamaClient, OllamaClient, TimeoutMixin, create_client
from .facade import (
    apply_preset,
    configure_timeout,
    get_timeout,
    set_timeout,
    with_extended_timeout,
    with_long_timeout,
    with_quick_timeout,
    with_standard_timeout,
)
from .transport import find_transport, require_transport

__all__ = [
    'AsyncOllamaClient',
    'OllamaClient',
    'TimeoutMixin',
    'create_client',
    'apply_preset',
    'configure_timeout',
    'get_timeout',
    'set_timeout',
    'with_extended_timeout',
    'with_long_timeout',
    'with_quick_timeout',
    'with_standard_timeout',
    'find_transport',
    'require_transport',
]
