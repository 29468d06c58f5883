"""Core business logic for go links."""

from .service import LinkService

__all__ = ["LinkService"]
