"""Domain interfaces package - Protocols for the wrapped client."""

from .llm_client import ChatClient

__all__ = ["ChatClient"]
