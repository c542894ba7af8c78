"""
Ollama timeout helpers - configure request timeouts of ollama clients for long-running LLM requests.
"""

__version__ = "1.0.0"

from .domain.errors import (
    TimeoutConfigurationError,
    NullClientError,
    InvalidTimeoutError,
    NullTransformError,
    TransportUnavailableError,
)
from .domain.timeouts import TimeoutPreset
from .infrastructure.ollama import (
    AsyncOllamaClient,
    OllamaClient,
    TimeoutMixin,
    apply_preset,
    configure_timeout,
    create_client,
    get_timeout,
    set_timeout,
    with_extended_timeout,
    with_long_timeout,
    with_quick_timeout,
    with_standard_timeout,
)

__all__ = [
    "TimeoutConfigurationError",
    "NullClientError",
    "InvalidTimeoutError",
    "NullTransformError",
    "TransportUnavailableError",
    "TimeoutPreset",
    "AsyncOllamaClient",
    "OllamaClient",
    "TimeoutMixin",
    "apply_preset",
    "configure_timeout",
    "create_client",
    "get_timeout",
    "set_timeout",
    "with_extended_timeout",
    "with_long_timeout",
    "with_quick_timeout",
    "with_standard_timeout",
]
