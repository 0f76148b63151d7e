"""Observability: logging"""

from .logging import setup_logging, get_logger, JSONFormatter

__all__ = [
    "setup_logging",
    "get_logger",
    "JSONFormatter",
]
