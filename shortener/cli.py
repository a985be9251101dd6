"""
Command-line interface for URL shortener storage.

Works directly against the configured storage backend, which is mostly
useful with the redis backend (the in-memory one only lives for a single
command).

Usage:
    url-shortener-cli shorten <url>
    url-shortener-cli resolve <short_id>
    url-shortener-cli health
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from .exceptions import StorageError
from .fingerprint import ShortIDGenerator
from .service import URLShortenerService
from .storage import create_storage
from .common.logging_config import setup_logging


def _print_json(payload: dict, error: bool = False) -> None:
    print(json.dumps(payload, indent=2), file=sys.stderr if error else sys.stdout)


class URLShortenerCLI:
    """Command-line interface for URL shortener."""

    def __init__(self, config, verbose: bool = False):
        """Initialize CLI."""
        self.config = config
        self.verbose = verbose
        # stdout carries the JSON result
        self.logger = setup_logging(level="DEBUG" if verbose else "ERROR", stream=sys.stderr)
        self.storage = None
        self.service = None

    async def initialize(self):
        """Connect storage and build the service."""
        self.storage = await create_storage(self.config, logger=self.logger)
        self.service = URLShortenerService(
            storage=self.storage,
            host=self.config.base_url,
            generator=ShortIDGenerator(),
            logger=self.logger,
            storage_timeout=self.config.storage_timeout_seconds,
        )

    async def cleanup(self):
        """Cleanup resources."""
        if self.service:
            await self.service.close()

    async def shorten(self, url: str) -> int:
        """Shorten a URL."""
        try:
            short_url = await self.service.get_short_url(url)
        except StorageError as e:
            _print_json({"success": False, "error": str(e)}, error=True)
            return 1

        _print_json({
            "success": True,
            "short_id": short_url.rsplit("/", 1)[-1],
            "short_url": short_url,
            "original_url": url,
        })
        return 0

    async def resolve(self, short_id: str) -> int:
        """Get original URL for a short ID."""
        try:
            original_url = await self.service.resolve(short_id)
        except StorageError as e:
            _print_json({"success": False, "error": str(e)}, error=True)
            return 1

        if original_url is None:
            _print_json({
                "success": False,
                "error": f"Short ID '{short_id}' not found"
            }, error=True)
            return 1

        _print_json({
            "success": True,
            "short_id": short_id,
            "original_url": original_url,
        })
        return 0

    async def health(self) -> int:
        """Check storage health."""
        health_status = await self.service.health_check()
        _print_json({
            "success": health_status["overall"],
            "backend": self.config.storage_backend,
            "health": health_status,
        })
        return 0 if health_status["overall"] else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="url-shortener-cli",
        description="URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s --backend redis shorten https://example.com/long/url

  # Get original URL
  %(prog)s --backend redis resolve 1a2b3c4d

  # Check storage health
  %(prog)s --backend redis health
        """
    )

    parser.add_argument(
        "--backend",
        choices=["memory", "redis"],
        help="Storage backend (default: from STORAGE_BACKEND env)"
    )
    parser.add_argument(
        "--redis-addr",
        help="Redis address host:port (default: from REDIS_ADDR env)"
    )
    parser.add_argument(
        "--base-url",
        help="Base URL for short links (default: from BASE_URL env)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    resolve_parser = subparsers.add_parser("resolve", help="Get original URL")
    resolve_parser.add_argument("short_id", help="Short ID to lookup")

    subparsers.add_parser("health", help="Check storage health")

    return parser


async def run(argv: Optional[List[str]] = None, config=None) -> int:
    """Parse arguments and execute a command, returning the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if config is None:
        from config import load_config
        config = load_config()

    overrides = {
        "storage_backend": args.backend,
        "redis_addr": args.redis_addr,
        "base_url": args.base_url,
    }
    config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    cli = URLShortenerCLI(config, verbose=args.verbose)

    try:
        try:
            await cli.initialize()
        except StorageError as e:
            _print_json({"success": False, "error": str(e)}, error=True)
            return 1

        if args.command == "shorten":
            return await cli.shorten(args.url)
        elif args.command == "resolve":
            return await cli.resolve(args.short_id)
        elif args.command == "health":
            return await cli.health()
        else:
            parser.print_help()
            return 1

    finally:
        await cli.cleanup()


def main():
    """Console script entry point."""
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
