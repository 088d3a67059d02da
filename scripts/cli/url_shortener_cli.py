#!/usr/bin/env python3
"""
Command-line interface for URL shortener service.

Talks to the store directly, bypassing the HTTP layer. Settings come from
the same environment / .env as the server; flags override them.

Usage:
    python url_shortener_cli.py shorten <url> [--custom-code CODE]
    python url_shortener_cli.py get <short_code>
    python url_shortener_cli.py delete <short_code>
"""

import argparse
import asyncio
import json
import sys
import os
from typing import Optional

# Add parent directories to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from pydantic import ValidationError as ConfigError

from app import build_service
from config import Config, load_config
from lib.errors import ShortenerError, NotFoundError
from lib.service import URLShortenerService
from lib.common.logging_config import setup_logging


class URLShortenerCLI:
    """Command-line interface for URL shortener."""
    
    def __init__(self, args: argparse.Namespace):
        """Initialize CLI from parsed arguments."""
        self.args = args
        self.logger = setup_logging(level="DEBUG" if args.verbose else "WARNING")
        self.service: Optional[URLShortenerService] = None
    
    def initialize(self, config: Config):
        """Create store and service from configuration."""
        self.service = build_service(config, self.logger)
    
    async def cleanup(self):
        """Cleanup resources."""
        if self.service:
            await self.service.close()
    
    @staticmethod
    def _emit(payload: dict, error: bool = False) -> int:
        print(json.dumps(payload, indent=2), file=sys.stderr if error else sys.stdout)
        return 1 if error else 0
    
    async def shorten(self, url: str, custom_code: Optional[str] = None) -> int:
        """Shorten a URL."""
        try:
            result = await self.service.create_short_url(url, custom_code)
        except ShortenerError as e:
            return self._emit({"success": False, "error": str(e)}, error=True)
        
        return self._emit({
            "success": True,
            "short_code": result["short_code"],
            "original_url": result["original_url"],
            "created_at": result["created_at"].isoformat(),
        })
    
    async def get(self, short_code: str) -> int:
        """Show the mapping for a short code."""
        try:
            mapping = await self.service.get_url_info(short_code)
        except NotFoundError:
            return self._emit(
                {"success": False, "error": f"Short code '{short_code}' not found"},
                error=True,
            )
        except ShortenerError as e:
            return self._emit({"success": False, "error": str(e)}, error=True)
        
        return self._emit({"success": True, **mapping.to_dict()})
    
    async def delete(self, short_code: str) -> int:
        """Delete a short code."""
        try:
            await self.service.delete_short_url(short_code)
        except ShortenerError as e:
            return self._emit({"success": False, "error": str(e)}, error=True)
        
        return self._emit({"success": True, "message": "Short URL deleted"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url
  
  # Shorten with custom code
  %(prog)s shorten https://example.com/long/url --custom-code mylink
  
  # Show a mapping
  %(prog)s get mylink
  
  # Delete a mapping
  %(prog)s delete mylink
        """
    )
    
    parser.add_argument(
        "--backend",
        choices=["postgres", "supabase", "memory"],
        help="Store backend (default: STORE_BACKEND)"
    )
    
    parser.add_argument("--db-url", help="PostgreSQL connection URL (default: DATABASE_URL)")
    parser.add_argument("--supabase-url", help="Supabase project URL (default: SUPABASE_URL)")
    parser.add_argument("--supabase-key", help="Supabase service key (default: SUPABASE_KEY)")
    parser.add_argument("--length", type=int, help="Generated code length (default: SHORT_CODE_LENGTH)")
    
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")
    
    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--custom-code", help="Custom short code")
    
    get_parser = subparsers.add_parser("get", help="Show the mapping for a short code")
    get_parser.add_argument("short_code", help="Short code to lookup")
    
    delete_parser = subparsers.add_parser("delete", help="Delete a short code")
    delete_parser.add_argument("short_code", help="Short code to delete")
    
    return parser


def load_cli_config(args: argparse.Namespace) -> Config:
    """Server configuration with any store flags given on the command line applied."""
    overrides = {
        "store_backend": args.backend,
        "database_url": args.db_url,
        "supabase_url": args.supabase_url,
        "supabase_key": args.supabase_key,
        "short_code_length": args.length,
    }
    return load_config(**{k: v for k, v in overrides.items() if v is not None})


async def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    try:
        config = load_cli_config(args)
    except ConfigError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2
    
    cli = URLShortenerCLI(args)
    cli.initialize(config)
    
    try:
        if args.command == "shorten":
            return await cli.shorten(args.url, args.custom_code)
        elif args.command == "get":
            return await cli.get(args.short_code)
        elif args.command == "delete":
            return await cli.delete(args.short_code)
        parser.print_help()
        return 1
    finally:
        await cli.cleanup()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
