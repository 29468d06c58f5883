"""Common utilities for go links."""

from .validators import normalize_url, is_valid_shortcut
from .logging_config import setup_logging

__all__ = [
    "normalize_url",
    "is_valid_shortcut",
    "setup_logging",
]
