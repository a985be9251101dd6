"""Logging configuration for URL shortener."""

import json
import logging
import sys
from typing import Optional, TextIO


LOGGER_NAME = "url_shortener"


class JsonFormatter(logging.Formatter):
    """One JSON object per line; messages are escaped, so URLs with quotes stay valid."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Setup logging configuration.

    Handlers are attached to the ``url_shortener`` logger; module loggers
    under ``shortener.*`` and ``web_app.*`` are routed to the same handlers.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        json_format: Whether to use JSON format
        stream: Console stream, stdout by default

    Returns:
        Configured logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handlers = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)

    for name in (LOGGER_NAME, "shortener", "web_app"):
        configured = logging.getLogger(name)
        configured.setLevel(numeric_level)
        configured.handlers.clear()
        for handler in handlers:
            configured.addHandler(handler)
        configured.propagate = False

    return logging.getLogger(LOGGER_NAME)
