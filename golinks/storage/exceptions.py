"""Exceptions raised by link stores.

Classes:
    LinkStoreError:
        Generic base class for storage-related exceptions.

    LinkStoreIOError:
        Raised when the data file cannot be read or written.

    LinkFileFormatError:
        Raised when the data file exists but does not hold a valid list of links.
"""


class LinkStoreError(Exception):
    """Generic base class for storage-related exceptions."""

    pass


class LinkStoreIOError(LinkStoreError):
    """Exception raised when the data file cannot be read or written."""

    pass


class LinkFileFormatError(LinkStoreError):
    """Exception raised when the data file holds malformed content."""

    pass
