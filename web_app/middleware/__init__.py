"""Middleware for go links web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
