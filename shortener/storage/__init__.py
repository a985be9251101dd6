"""Storage layer for URL shortener."""

import logging
from typing import Optional

from .base import URLStorageBase
from .memory import InMemoryStorage
from .redis_storage import RedisStorage

__all__ = ["URLStorageBase", "InMemoryStorage", "RedisStorage", "create_storage"]

BACKENDS = ("memory", "redis")


async def create_storage(config, logger: Optional[logging.Logger] = None) -> URLStorageBase:
    """Create the storage backend selected by configuration.

    The Redis backend is connected before it is returned, so an unreachable
    server fails here rather than on first use.

    Args:
        config: Configuration instance
        logger: Optional logger

    Returns:
        Ready-to-use storage backend

    Raises:
        ValueError: If the backend name is unknown
        StorageConnectionError: If Redis cannot be reached
    """
    logger = logger or logging.getLogger(__name__)
    backend = config.storage_backend.lower()

    if backend == "memory":
        logger.info("Using in-memory storage")
        return InMemoryStorage(logger=logger)

    if backend == "redis":
        logger.info(f"Connecting to Redis at {config.redis_addr} (db={config.redis_db})")
        storage = RedisStorage(
            addr=config.redis_addr,
            password=config.redis_password,
            db=config.redis_db,
            ttl_seconds=config.redis_ttl_seconds,
            operation_timeout=config.storage_timeout_seconds,
            logger=logger,
        )
        try:
            await storage.connect()
        except Exception:
            await storage.close()
            raise
        return storage

    raise ValueError(f"Unknown storage backend '{config.storage_backend}' (expected one of {BACKENDS})")
