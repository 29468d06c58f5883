#!/usr/bin/env python3
"""
Command-line interface for go links.

Works directly on the links file, so it should not be used to add links while
the server is running (the server would overwrite them on its next save).

Usage:
    python golinks_cli.py add <shortcut> <url>
    python golinks_cli.py get <shortcut>
    python golinks_cli.py list
"""

import argparse
import asyncio
import json
import sys
import os
from typing import List, Optional

# Add parent directories to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from config import load_config
from golinks.service import LinkService
from golinks.storage.json_file import JSONFileLinkStore
from golinks.storage.exceptions import LinkStoreError
from golinks.common.logging_config import setup_logging


class GoLinksCLI:
    """Command-line interface for go links."""

    def __init__(self, data_file: str, verbose: bool = False):
        """Initialize CLI."""
        self.data_file = data_file
        self.verbose = verbose
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.service = None

    async def initialize(self):
        """Load the links file and build the service."""
        store = JSONFileLinkStore(file_path=self.data_file, logger=self.logger)
        await store.load()
        self.service = LinkService(store=store, logger=self.logger)

    async def add(self, shortcut: str, url: str):
        """Add or overwrite a link."""
        try:
            link = await self.service.add_link(shortcut, url)
        except (ValueError, LinkStoreError) as e:
            print(json.dumps({
                "success": False,
                "error": str(e)
            }, indent=2), file=sys.stderr)
            return 1

        print(json.dumps({
            "success": True,
            "shortcut": link.shortcut,
            "url": link.url,
        }, indent=2))
        return 0

    async def get(self, shortcut: str):
        """Print the destination for a shortcut."""
        url = await self.service.resolve(shortcut)

        if url is None:
            print(json.dumps({
                "success": False,
                "error": f"Shortcut '{shortcut}' not found"
            }, indent=2), file=sys.stderr)
            return 1

        print(json.dumps({
            "success": True,
            "shortcut": shortcut,
            "url": url,
        }, indent=2))
        return 0

    async def list_links(self):
        """Print every link."""
        links = await self.service.list_links()

        print(json.dumps({
            "success": True,
            "count": len(links),
            "links": [
                {"shortcut": shortcut, "url": url}
                for shortcut, url in sorted(links.items())
            ],
        }, indent=2))
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Go Links CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Add a link (http:// is added when no scheme is given)
  %(prog)s add gh github.com

  # Look up a link
  %(prog)s get gh

  # List all links
  %(prog)s list
        """
    )

    parser.add_argument(
        "--data-file",
        default=None,
        help="Links file (default: from DATA_FILE env or data/links.json)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    add_parser = subparsers.add_parser("add", help="Add or overwrite a link")
    add_parser.add_argument("shortcut", help="Shortcut key")
    add_parser.add_argument("url", help="Destination URL")

    get_parser = subparsers.add_parser("get", help="Get the destination of a shortcut")
    get_parser.add_argument("shortcut", help="Shortcut to lookup")

    subparsers.add_parser("list", help="List all links")

    return parser


async def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    data_file = args.data_file or load_config().data_file
    cli = GoLinksCLI(data_file=data_file, verbose=args.verbose)

    try:
        await cli.initialize()
    except LinkStoreError as e:
        print(json.dumps({
            "success": False,
            "error": f"Could not load {data_file}: {e}"
        }, indent=2), file=sys.stderr)
        return 1

    if args.command == "add":
        return await cli.add(args.shortcut, args.url)
    elif args.command == "get":
        return await cli.get(args.shortcut)
    elif args.command == "list":
        return await cli.list_links()

    parser.print_help()
    return 1


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
