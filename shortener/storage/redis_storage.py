"""Redis storage backend for URL shortener."""

import asyncio
import logging
from typing import Any, Awaitable, Optional, Tuple

import redis.asyncio as redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from ..exceptions import StorageConnectionError, StorageError, StorageTimeoutError
from .base import URLStorageBase


KEY_PREFIX = "url"


def parse_redis_addr(addr: str) -> Tuple[str, int]:
    """Split a ``host:port`` address; the port defaults to 6379."""
    host, sep, port = addr.rpartition(":")
    if not sep:
        return addr, 6379
    if not port.isdigit():
        raise ValueError(f"Invalid Redis port in address '{addr}'")
    return host or "localhost", int(port)


class RedisStorage(URLStorageBase):
    """Redis-backed storage for shared or durable deployments.

    Each mapping is stored under ``url:<short_id>`` with a uniform TTL
    applied at write time. ``connect()`` must succeed before the storage is
    used; it PINGs the server and raises StorageConnectionError otherwise.
    """

    def __init__(
        self,
        addr: str = "localhost:6379",
        password: Optional[str] = None,
        db: int = 0,
        ttl_seconds: int = 0,
        operation_timeout: Optional[float] = 5.0,
        client: Optional[redis.Redis] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis storage.

        Args:
            addr: Redis server address (e.g., localhost:6379)
            password: Optional password for Redis authentication
            db: Redis database index
            ttl_seconds: TTL for stored mappings, 0 means no expiration
            operation_timeout: Default deadline in seconds for each operation
            client: Pre-built Redis client (mainly for tests)
            logger: Optional logger instance
        """
        if ttl_seconds < 0:
            raise ValueError(f"ttl_seconds must be >= 0, got {ttl_seconds}")

        self.addr = addr
        self.db = db
        self.ttl_seconds = ttl_seconds
        self.operation_timeout = operation_timeout
        self.logger = logger or logging.getLogger(__name__)
        self._closed = False

        if client is None:
            host, port = parse_redis_addr(addr)
            client = redis.Redis(
                host=host,
                port=port,
                db=db,
                password=password or None,
                encoding="utf-8",
                decode_responses=True,
            )
        self.client = client

    async def connect(self, timeout: Optional[float] = None) -> None:
        """Verify connectivity with a PING.

        Raises:
            StorageConnectionError: If Redis cannot be reached
        """
        try:
            await self._call(self.client.ping(), timeout)
        except StorageError as e:
            self.logger.error(f"Failed to connect to Redis at {self.addr}/{self.db}: {e}")
            raise StorageConnectionError(
                f"Failed to connect to Redis at {self.addr}/{self.db}: {e}"
            ) from e
        self.logger.info(f"Connected to Redis at {self.addr}/{self.db} (ttl={self.ttl_seconds}s)")

    async def set(self, short_id: str, url: str, timeout: Optional[float] = None) -> None:
        key = self.get_key(short_id)
        ex = self.ttl_seconds if self.ttl_seconds > 0 else None
        await self._call(self.client.set(key, url, ex=ex), timeout)

    async def get(self, short_id: str, timeout: Optional[float] = None) -> Tuple[str, bool]:
        url = await self._call(self.client.get(self.get_key(short_id)), timeout)
        if url is None:
            return "", False
        return url, True

    async def close(self) -> None:
        """Close Redis connection."""
        if self._closed:
            return
        self._closed = True
        await self.client.aclose()
        self.logger.info("Redis connection closed")

    async def health_check(self) -> bool:
        try:
            await self._call(self.client.ping(), None)
        except StorageError as e:
            self.logger.warning(f"Redis health check failed: {e}")
            return False
        return True

    def get_key(self, short_id: str) -> str:
        """Generate the namespaced Redis key for a short ID.

        Args:
            short_id: The short ID

        Returns:
            Redis key
        """
        return f"{KEY_PREFIX}:{short_id}"

    async def _call(self, awaitable: Awaitable[Any], timeout: Optional[float]) -> Any:
        """Await a Redis command under a deadline, translating failures."""
        deadline = timeout if timeout is not None else self.operation_timeout
        try:
            if deadline:
                return await asyncio.wait_for(awaitable, timeout=deadline)
            return await awaitable
        except (asyncio.TimeoutError, RedisTimeoutError) as e:
            raise StorageTimeoutError(f"Redis operation timed out after {deadline}s") from e
        except RedisConnectionError as e:
            raise StorageConnectionError(f"Can't connect to Redis at {self.addr}/{self.db}") from e
        except RedisError as e:
            raise StorageError(f"Redis error: {e}") from e
