"""
Ollama client handles with fluent timeout configuration.

``OllamaClient`` / ``AsyncOllamaClient`` are drop-in ``ollama`` clients that
remember the selected model and expose the timeout facade as chainable
methods. ``create_client`` builds one from explicit arguments or settings,
passing the timeout through the public ``timeout=`` option of ``ollama``.
"""

from __future__ import annotations
import logging
import os
from datetime import timedelta
from typing import Any, Optional, Union

from ollama import AsyncClient, Client

from ...domain.timeouts import DurationLike, TimeoutPreset, to_timedelta
from ..config.settings import Settings, get_settings
from . import facade as _facade


logger = logging.getLogger(__name__)

DEFAULT_HOST = 'http://localhost:11434'
DEFAULT_MODEL = 'llama3.2'


class TimeoutMixin:
    """Fluent timeout configuration for ollama clients.

    Mutating methods return ``self`` so they can be chained; the last call wins:

        client = OllamaClient(model='llama3.2').with_quick_timeout().set_timeout(90)
    """

    @property
    def timeout(self) -> Optional[timedelta]:
        """Current read timeout, or None if unknown or disabled."""
        return _facade.get_timeout(self)

    def get_timeout(self) -> Optional[timedelta]:
        return _facade.get_timeout(self)

    def set_timeout(self, timeout: DurationLike):
        return _facade.set_timeout(self, timeout)

    def configure_timeout(self, transform: _facade.TimeoutTransform):
        return _facade.configure_timeout(self, transform)

    def with_quick_timeout(self):
        return _facade.with_quick_timeout(self)

    def with_standard_timeout(self):
        return _facade.with_standard_timeout(self)

    def with_long_timeout(self):
        return _facade.with_long_timeout(self)

    def with_extended_timeout(self):
        return _facade.with_extended_timeout(self)

    def with_preset(self, preset: Union[TimeoutPreset, str]):
        return _facade.apply_preset(self, preset)


def _resolve_host(host: Optional[str]) -> str:
    return host or os.getenv('OLLAMA_HOST') or DEFAULT_HOST


def _effective_host(client: Any) -> str:
    # ollama normalizes the host (scheme, port); report the URL actually used
    return str(client._client.base_url).rstrip('/')


def _timeout_seconds(timeout: Optional[DurationLike]) -> Optional[float]:
    if timeout is None:
        return None
    return to_timedelta(timeout).total_seconds()


class OllamaClient(TimeoutMixin, Client):
    """Synchronous ollama client bound to a model, with fluent timeouts."""

    def __init__(
        self,
        host: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        *,
        timeout: Optional[DurationLike] = None,
        **kwargs: Any
    ):
        self.model = model
        super().__init__(host=_resolve_host(host), timeout=_timeout_seconds(timeout), **kwargs)
        self.host = _effective_host(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self.host!r}, model={self.model!r})"


class AsyncOllamaClient(TimeoutMixin, AsyncClient):
    """Asynchronous ollama client bound to a model, with fluent timeouts."""

    def __init__(
        self,
        host: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        *,
        timeout: Optional[DurationLike] = None,
        **kwargs: Any
    ):
        self.model = model
        super().__init__(host=_resolve_host(host), timeout=_timeout_seconds(timeout), **kwargs)
        self.host = _effective_host(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self.host!r}, model={self.model!r})"


def create_client(
    host: Optional[str] = None,
    model: Optional[str] = None,
    *,
    timeout: Optional[DurationLike] = None,
    preset: Optional[Union[TimeoutPreset, str]] = None,
    settings: Optional[Settings] = None,
    asynchronous: bool = False,
    **kwargs: Any
) -> Union[OllamaClient, AsyncOllamaClient]:
    """Build a client from explicit arguments, falling back to settings.

    Timeout precedence: ``timeout`` argument, then ``preset``, then the
    settings' resolved timeout. With none of them the ollama default applies.
    """
    settings = settings or get_settings()

    if timeout is None and preset is not None:
        if not isinstance(preset, TimeoutPreset):
            preset = TimeoutPreset.from_name(preset)
        timeout = preset.duration
    if timeout is None:
        timeout = settings.resolved_timeout()

    cls = AsyncOllamaClient if asynchronous else OllamaClient
    client = cls(
        host=host or settings.host,
        model=model or settings.model,
        timeout=timeout,
        **kwargs
    )
    logger.info(
        f"Ollama client initialized - Model: {client.model}, Host: {client.host}, "
        f"Timeout: {client.get_timeout()}"
    )
    return client
