"""Abstract base class for URL shortener storage backends."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple


class URLStorageBase(ABC):
    """Abstract base class for short ID -> URL storage operations."""

    @abstractmethod
    async def set(self, short_id: str, url: str, timeout: Optional[float] = None) -> None:
        """Store or overwrite the URL mapping for a short ID.

        Args:
            short_id: The short ID to store under
            url: The original URL, stored verbatim
            timeout: Optional deadline in seconds for networked backends

        Raises:
            StorageConnectionError: If the backend is unreachable
        """
        pass

    @abstractmethod
    async def get(self, short_id: str, timeout: Optional[float] = None) -> Tuple[str, bool]:
        """Get the URL for a short ID.

        A missing key is not an error.

        Args:
            short_id: The short ID to lookup
            timeout: Optional deadline in seconds for networked backends

        Returns:
            Tuple of (url, found); ("", False) if the short ID is unknown

        Raises:
            StorageConnectionError: If the backend is unreachable
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release held connections. Safe to call more than once."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the backend is healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass
