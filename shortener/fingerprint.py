"""Short ID generation utilities."""

import hashlib
import string


class ShortIDGenerator:
    """Generate content-addressed short IDs for URLs.

    A short ID is the first ``length`` hex characters of the SHA-256 digest of
    the URL's UTF-8 bytes. The same URL always yields the same ID, so
    re-shortening a URL is a no-op overwrite rather than a new entry.

    With the default length of 8 the ID space is 16**8 (about 4.3e9 values,
    i.e. 32 bits). By the birthday bound a collision becomes likely (p ~ 0.5)
    only after roughly 77,000 distinct URLs, and the chance for any two given
    URLs is 1 in 2**32. That is accepted for the intended scale; a collision
    would make the later URL overwrite the earlier one.
    """

    HEX_CHARS = string.digits + "abcdef"
    DEFAULT_LENGTH = 8

    def __init__(self, length: int = DEFAULT_LENGTH):
        """Initialize short ID generator.

        Args:
            length: Number of hex characters kept from the digest (1-64)
        """
        if not 1 <= length <= 64:
            raise ValueError(f"length must be between 1 and 64, got {length}")
        self.length = length

    def generate(self, url: str) -> str:
        """Generate the short ID for a URL.

        Any string is accepted, including the empty string.

        Args:
            url: The URL to fingerprint

        Returns:
            Lowercase hex short ID
        """
        digest = hashlib.sha256(url.encode("utf-8")).hexdigest()
        return digest[:self.length]

    def is_valid_format(self, short_id: str) -> bool:
        """Check if a string looks like an ID this generator produces."""
        return len(short_id) == self.length and all(c in self.HEX_CHARS for c in short_id)
