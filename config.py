"""Configuration management for URL shortener."""

from typing import Literal, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        description="Port to listen on"
    )

    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes. Use the redis backend when > 1, in-memory mappings are per process."
    )

    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL for short links, without a trailing slash"
    )

    # Storage settings
    storage_backend: Literal["memory", "redis"] = Field(
        default="memory",
        description="Storage backend: 'memory' (per process) or 'redis'"
    )

    redis_addr: str = Field(
        default="localhost:6379",
        description="Redis server address (host:port)"
    )

    redis_password: Optional[str] = Field(
        default=None,
        description="Redis password (empty if no password)"
    )

    redis_db: int = Field(
        default=0,
        ge=0,
        le=15,
        description="Redis database number"
    )

    redis_ttl_seconds: int = Field(
        default=0,
        ge=0,
        description="TTL for URL mappings in seconds (0 means no expiration)"
    )

    storage_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Deadline for each storage operation"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
