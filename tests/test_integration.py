"""Integration tests for URL shortener."""

import hashlib
import signal

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

import app as app_module
from config import Config
from shortener.exceptions import StorageConnectionError
from shortener.storage import InMemoryStorage, RedisStorage
from shortener.common.logging_config import setup_logging


@pytest.mark.asyncio
class TestIntegration:
    """End-to-end integration tests through the application lifespan."""

    async def test_full_url_lifecycle(self):
        """Startup, shorten, redirect, miss, shutdown."""
        logger = setup_logging(level="DEBUG")
        config = Config(base_url="http://h:3000", storage_backend="memory")
        app = app_module.build_app(config, logger)

        async with app.router.lifespan_context(app):
            assert isinstance(app.state.storage, InMemoryStorage)

            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
                # 1. Create short URL
                create_response = await client.post("/", content="https://foo.test/x")
                assert create_response.status_code == 200

                expected_id = hashlib.sha256(b"https://foo.test/x").hexdigest()[:8]
                assert create_response.text == f"http://h:3000/{expected_id}"

                # 2. Follow it
                redirect_response = await client.get(f"/{expected_id}", follow_redirects=False)
                assert redirect_response.status_code == 301
                assert redirect_response.headers["location"] == "https://foo.test/x"

                # 3. Unknown ID
                missing = await client.get("/doesnotexist12", follow_redirects=False)
                assert missing.status_code == 404

                # 4. Health
                health = await client.get("/api/health")
                assert health.json()["status"] == "healthy"

    async def test_startup_fails_fast_without_redis(self, monkeypatch):
        """An unreachable Redis aborts startup instead of serving errors."""

        async def refuse(self, timeout=None):
            raise StorageConnectionError("Failed to connect to Redis at nowhere:6379/0")

        monkeypatch.setattr(RedisStorage, "connect", refuse)

        logger = setup_logging(level="DEBUG")
        config = Config(storage_backend="redis", redis_addr="nowhere:6379")
        app = app_module.build_app(config, logger)

        with pytest.raises(StorageConnectionError):
            async with app.router.lifespan_context(app):
                pass

        assert app.state.service is None

    async def test_shutdown_closes_storage(self, monkeypatch):
        closed = []

        async def record_close(self):
            closed.append(True)

        monkeypatch.setattr(InMemoryStorage, "close", record_close)

        logger = setup_logging(level="DEBUG")
        app = app_module.build_app(Config(storage_backend="memory"), logger)

        async with app.router.lifespan_context(app):
            assert closed == []

        assert closed == [True]


class TestEntryPoint:
    """Process startup through uvicorn."""

    def test_main_runs_app_factory_with_workers(self, monkeypatch):
        calls = []
        monkeypatch.setattr(app_module.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
        monkeypatch.setenv("WORKERS", "2")
        monkeypatch.setenv("STORAGE_BACKEND", "redis")

        app_module.main()

        assert len(calls) == 1
        args, kwargs = calls[0]
        assert args == ("app:create_application",)
        assert kwargs["factory"] is True
        assert kwargs["workers"] == 2
        assert kwargs["lifespan"] == "on"

    def test_main_leaves_signals_to_uvicorn(self, monkeypatch):
        installed = []
        monkeypatch.setattr(app_module.uvicorn, "run", lambda *args, **kwargs: None)
        monkeypatch.setattr(signal, "signal", lambda *args: installed.append(args))

        app_module.main()

        assert installed == []

    def test_create_application_uses_lifespan(self, monkeypatch):
        monkeypatch.setenv("STORAGE_BACKEND", "memory")

        app = app_module.create_application()

        assert isinstance(app, FastAPI)
        assert app.router.lifespan_context is app_module.lifespan
        assert app.state.config.storage_backend == "memory"
