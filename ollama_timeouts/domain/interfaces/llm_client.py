"""
Chat client protocol interface.
Defines the one capability of the wrapped client that callers rely on.
"""

from __future__ import annotations
from typing import Protocol, List, Dict, Any, Optional


class ChatClient(Protocol):
    """Protocol for clients able to send a chat request to a model."""

    def chat(
        self,
        model: str = '',
        messages: Optional[List[Dict[str, Any]]] = None,
        **kwargs: Any
    ) -> Any:
        """Send chat request to the model server."""
        ...
