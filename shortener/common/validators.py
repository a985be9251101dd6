"""Request validation utilities for URL shortener."""

from ..exceptions import ValidationError


def parse_url_body(body: bytes) -> str:
    """Extract the URL to shorten from a raw request body.

    Only surrounding whitespace is removed; the URL itself is not checked.

    Args:
        body: Raw request body

    Returns:
        The trimmed URL

    Raises:
        ValidationError: If the body is not UTF-8 or is empty after trimming
    """
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValidationError("Request body must be UTF-8 text") from e

    url = text.strip()
    if not url:
        raise ValidationError("URL cannot be empty")
    return url
