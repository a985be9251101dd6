"""Common utilities for URL shortener."""

from .validators import parse_url_body
from .url_builder import build_short_url, redirect_location
from .logging_config import setup_logging

__all__ = [
    "parse_url_body",
    "build_short_url",
    "redirect_location",
    "setup_logging",
]
