"""Core business logic for URL shortener."""

from .fingerprint import ShortIDGenerator
from .service import URLShortenerService

__all__ = ["ShortIDGenerator", "URLShortenerService"]
