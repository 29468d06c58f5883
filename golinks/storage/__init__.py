"""Storage layer for go links."""

from .base import LinkStoreBase
from .json_file import JSONFileLinkStore
from .models import Link
from .exceptions import LinkStoreError, LinkStoreIOError, LinkFileFormatError

__all__ = [
    "LinkStoreBase",
    "JSONFileLinkStore",
    "Link",
    "LinkStoreError",
    "LinkStoreIOError",
    "LinkFileFormatError",
]
