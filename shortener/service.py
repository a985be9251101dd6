"""Business logic service for URL shortener."""

import logging
from typing import Optional, Dict

from .fingerprint import ShortIDGenerator
from .storage.base import URLStorageBase
from .exceptions import StorageError
from .common.url_builder import build_short_url


class URLShortenerService:
    """Service layer for URL shortening business logic.

    The service keeps no mappings of its own; the storage backend is the
    single source of truth.
    """

    def __init__(
        self,
        storage: URLStorageBase,
        host: str,
        generator: Optional[ShortIDGenerator] = None,
        logger: Optional[logging.Logger] = None,
        storage_timeout: Optional[float] = None,
    ):
        """Initialize URL shortener service.

        Args:
            storage: Storage backend
            host: Base URL for short links, without a trailing slash
                (e.g., http://example.com:3000)
            generator: Optional short ID generator
            logger: Optional logger
            storage_timeout: Deadline in seconds for each storage call
        """
        self.storage = storage
        self.host = host
        self.generator = generator or ShortIDGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.storage_timeout = storage_timeout

    async def shorten(self, url: str) -> str:
        """Shorten a URL and return its short ID.

        The mapping is written on every call. Rewriting an existing ID is
        harmless because the same URL always produces the same ID.

        Args:
            url: The URL to shorten, stored verbatim

        Returns:
            The short ID

        Raises:
            StorageError: If the mapping could not be stored
        """
        short_id = self.generator.generate(url)

        try:
            await self.storage.set(short_id, url, timeout=self.storage_timeout)
        except StorageError as e:
            self.logger.error(f"Failed to store short URL {short_id}: {e}")
            raise

        self.logger.info(f"Shortened URL: {short_id} -> {url}")
        return short_id

    async def get_short_url(self, url: str) -> str:
        """Shorten a URL and return the full short URL.

        Args:
            url: The URL to shorten

        Returns:
            host + "/" + short ID
        """
        short_id = await self.shorten(url)
        return build_short_url(short_id, self.host)

    async def resolve(self, short_id: str) -> Optional[str]:
        """Get the original URL for a short ID.

        Args:
            short_id: The short ID to lookup

        Returns:
            Original URL or None if not found

        Raises:
            StorageError: If the backend could not be queried
        """
        url, found = await self.storage.get(short_id, timeout=self.storage_timeout)

        if not found:
            self.logger.warning(f"Short ID not found: {short_id}")
            return None

        self.logger.debug(f"Resolved {short_id} -> {url}")
        return url

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        storage_healthy = await self.storage.health_check()

        return {
            "storage": storage_healthy,
            "overall": storage_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.storage.close()
