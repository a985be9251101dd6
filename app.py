#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: each request runs as its own task on the uvicorn event loop.
Storage backends are safe for concurrent use. With WORKERS > 1 use the redis
backend, since in-memory mappings are not shared between processes.

Usage:
    python app.py

Environment variables:
    BASE_URL - Base URL for short links (no trailing slash)
    PORT - Port to listen on (default 3000)
    STORAGE_BACKEND - 'memory' or 'redis'
    REDIS_ADDR, REDIS_PASSWORD, REDIS_DB, REDIS_TTL_SECONDS - Redis settings
    STORAGE_TIMEOUT_SECONDS - Deadline for each storage operation
    WORKERS - Number of uvicorn worker processes (default 1), each builds its own app
    LOG_LEVEL - Logging level
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortener.exceptions import StorageConnectionError
from shortener.fingerprint import ShortIDGenerator
from shortener.service import URLShortenerService
from shortener.storage import create_storage
from shortener.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create storage and service on startup, release them on shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    try:
        storage = await create_storage(config, logger=logger)
    except StorageConnectionError as e:
        logger.critical(f"Cannot start without storage: {e}")
        raise

    service = URLShortenerService(
        storage=storage,
        host=config.base_url,
        generator=ShortIDGenerator(),
        logger=logger,
        storage_timeout=config.storage_timeout_seconds,
    )

    app.state.storage = storage
    app.state.service = service

    logger.info(f"Service started, short URLs use {config.base_url}")

    yield

    logger.info("Shutting down URL shortener service...")
    await service.close()
    logger.info("Service stopped")


def build_app(config, logger) -> FastAPI:
    """Create the FastAPI app; storage and service are attached in lifespan."""
    app = create_app(
        storage_instance=None,
        service_instance=None,
        config=config,
        logger=logger,
    )
    app.router.lifespan_context = lifespan
    return app


def create_application() -> FastAPI:
    """App factory run by uvicorn in every worker process."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    return build_app(config, logger)


def main():
    """Main entry point.

    uvicorn owns SIGINT/SIGTERM handling; shutdown is logged by the lifespan.
    It exits non-zero when the lifespan fails to start (e.g. Redis is down).
    """
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump(exclude={'redis_password'})}")
    logger.info(f"Starting server on {config.host}:{config.port} with {config.workers} worker(s)")

    uvicorn.run(
        "app:create_application",
        factory=True,
        host=config.host,
        port=config.port,
        workers=config.workers,
        lifespan="on",
        log_level=config.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()
