"""Tests for common utilities."""

import json
import logging

import pytest
from shortener.common.validators import parse_url_body
from shortener.common.url_builder import build_short_url, redirect_location
from shortener.common.logging_config import JsonFormatter, setup_logging
from shortener.exceptions import ValidationError


class TestValidators:
    """Test request body parsing."""

    def test_returns_trimmed_url(self):
        assert parse_url_body(b"  https://example.com/x \r\n") == "https://example.com/x"

    def test_does_not_validate_url(self):
        """Anything non-empty is accepted as-is."""
        assert parse_url_body(b"not-a-url") == "not-a-url"
        assert parse_url_body(b"ftp://example.com") == "ftp://example.com"

    def test_keeps_inner_encoding(self):
        body = b"https://example.com/?a=%2F&b=c d"
        assert parse_url_body(body) == "https://example.com/?a=%2F&b=c d"

    def test_empty(self):
        with pytest.raises(ValidationError, match="empty"):
            parse_url_body(b"")

    def test_whitespace_only(self):
        with pytest.raises(ValidationError):
            parse_url_body(b" \t\n ")

    def test_not_utf8(self):
        with pytest.raises(ValidationError, match="UTF-8"):
            parse_url_body(b"\xff\xfe")


class TestURLBuilder:
    """Test URL building utilities."""

    def test_build_short_url(self):
        assert build_short_url("abcd1234", "http://h:3000") == "http://h:3000/abcd1234"

    def test_build_short_url_keeps_trailing_slash(self):
        assert build_short_url("abcd1234", "http://h:3000/") == "http://h:3000//abcd1234"

    def test_redirect_location_ascii_untouched(self):
        url = "https://example.com/p?x=%2F&y=a b&z=\"q\""
        assert redirect_location(url) == url

    def test_redirect_location_non_ascii(self):
        assert redirect_location("https://例え.jp/ü") == "https://%E4%BE%8B%E3%81%88.jp/%C3%BC"

    def test_redirect_location_crlf_cannot_split_header(self):
        url = "https://a.test/x\r\nSet-Cookie: evil=1"

        location = redirect_location(url)

        assert location == "https://a.test/x%0D%0ASet-Cookie: evil=1"
        assert "\r" not in location and "\n" not in location

    @pytest.mark.parametrize("char,encoded", [
        ("\x00", "%00"),
        ("\t", "%09"),
        ("\x1f", "%1F"),
        ("\x7f", "%7F"),
    ])
    def test_redirect_location_control_characters(self, char, encoded):
        assert redirect_location(f"https://a.test/{char}x") == f"https://a.test/{encoded}x"

    def test_redirect_location_signed_url_untouched(self, signed_url):
        assert redirect_location(signed_url) == signed_url


class TestLogging:
    """Test logging setup."""

    def test_setup_logging_level(self):
        logger = setup_logging(level="WARNING")

        assert logger.name == "url_shortener"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_setup_logging_is_repeatable(self):
        setup_logging(level="INFO")
        logger = setup_logging(level="INFO")

        assert len(logger.handlers) == 1

    def test_setup_logging_file(self, tmp_path):
        log_file = tmp_path / "shortener.log"
        logger = setup_logging(level="INFO", log_file=str(log_file))

        logger.info("hello file")
        for handler in logger.handlers:
            handler.flush()

        assert "hello file" in log_file.read_text()
        for handler in logger.handlers:
            handler.close()

    def test_json_formatter_escapes_message(self):
        record = logging.LogRecord(
            name="url_shortener",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg='Shortened URL: %s -> %s',
            args=("abcd1234", 'https://example.com/?q="x"'),
            exc_info=None,
        )

        payload = json.loads(JsonFormatter().format(record))

        assert payload["level"] == "INFO"
        assert payload["message"] == 'Shortened URL: abcd1234 -> https://example.com/?q="x"'
