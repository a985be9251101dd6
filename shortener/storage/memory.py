"""In-process storage backend for URL shortener."""

import logging
from typing import Dict, Optional, Tuple

from .base import URLStorageBase
from .locks import ReaderWriterLock


class InMemoryStorage(URLStorageBase):
    """Dict-backed storage for single-instance deployments.

    Mappings live for the lifetime of the process and are never evicted.
    The lock is held only around the dict access itself.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize in-memory storage.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._urls: Dict[str, str] = {}
        self._lock = ReaderWriterLock()

    async def set(self, short_id: str, url: str, timeout: Optional[float] = None) -> None:
        async with self._lock.write():
            self._urls[short_id] = url

    async def get(self, short_id: str, timeout: Optional[float] = None) -> Tuple[str, bool]:
        async with self._lock.read():
            url = self._urls.get(short_id)
        if url is None:
            return "", False
        return url, True

    async def close(self) -> None:
        """No-op: there is nothing to release."""
        pass

    async def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._urls)
