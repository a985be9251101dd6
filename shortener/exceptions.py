"""Exceptions raised by the URL shortener.

A missing short ID is not an exception: storage lookups report absence with a
``found`` flag and the service returns ``None``.
"""


class ShortenerError(Exception):
    """Base class for URL shortener errors."""

    pass


class ValidationError(ShortenerError):
    """Raised for malformed client input (e.g. an empty request body)."""

    pass


class StorageError(ShortenerError):
    """Raised when the storage backend fails to complete an operation."""

    pass


class StorageConnectionError(StorageError):
    """Raised when the storage backend is unreachable."""

    pass


class StorageTimeoutError(StorageConnectionError):
    """Raised when a storage operation does not finish before its deadline."""

    pass
