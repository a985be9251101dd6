"""URL building utilities for URL shortener."""

from urllib.parse import quote


def build_short_url(short_id: str, host: str) -> str:
    """Build complete short URL.

    The host is used as given; a trailing slash on it yields a double slash.

    Args:
        short_id: The short ID
        host: Base URL (e.g., http://example.com:3000)

    Returns:
        Complete short URL
    """
    return f"{host}/{short_id}"


def redirect_location(url: str) -> str:
    """Make a stored URL safe for a Location header.

    Printable ASCII is passed through untouched, so signed URLs keep their
    exact encoding. Control characters (which would split the header) and
    non-ASCII characters are percent-encoded as UTF-8.

    Args:
        url: The stored URL

    Returns:
        Header-safe URL
    """
    return "".join(c if _is_header_safe(c) else quote(c, safe="") for c in url)


def _is_header_safe(c: str) -> bool:
    return " " <= c < "\x7f"
