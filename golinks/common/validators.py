"""Validation utilities for go links."""

from typing import Tuple

# Exact paths answered by fixed routes; a shortcut equal to one of these
# could be stored but never reached
RESERVED_SHORTCUTS = frozenset({
    "add",
    "api/links",
    "api/health",
    "api/docs",
    "api/docs/oauth2-redirect",
    "api/redoc",
    "api/openapi.json",
})


def normalize_url(url: str) -> str:
    """Ensure a destination URL carries an explicit scheme.

    Args:
        url: The URL as typed by the user

    Returns:
        The trimmed URL, with ``http://`` prepended if it has no
        ``http://`` or ``https://`` scheme
    """
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        url = "http://" + url
    return url


def is_valid_shortcut(shortcut: str) -> Tuple[bool, str]:
    """Validate a shortcut.

    Args:
        shortcut: The shortcut to validate (already trimmed)

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not shortcut or not isinstance(shortcut, str):
        return False, "Shortcut is required"

    if shortcut in RESERVED_SHORTCUTS:
        return False, f"'{shortcut}' is a reserved path and cannot be used as a shortcut"

    return True, ""
