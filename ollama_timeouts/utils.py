"""
Utility functions for the ollama timeout helpers.
"""

import logging
import sys
from datetime import timedelta
from typing import Optional


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    # Reduce noise from third-party libraries unless debugging
    if level.upper() != "DEBUG":
        for name in ("httpx", "httpcore", "ollama"):
            logging.getLogger(name).setLevel(logging.WARNING)


def format_timeout(timeout: Optional[timedelta]) -> str:
    """Render a timeout for display; None means the client has no read timeout."""
    if timeout is None:
        return "none (no timeout)"
    return str(timeout)
