"""Command-line entry point for trying the connector against the live API."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Sequence

import httpx

from unsplash_connector.config import get_settings
from unsplash_connector.i18n import I18nService
from unsplash_connector.logging import configure_logging, logger
from unsplash_connector.services.connector import UnsplashConnector
from unsplash_connector.services.exceptions import ConfigurationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unsplash-connector")
    parser.add_argument("--locale", default=None)
    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="Search photos")
    search.add_argument("query")
    search.add_argument("--orientation", default="")
    search.add_argument("--color", default="")
    search.add_argument("--page", type=int, default=None)

    resolve = commands.add_parser("resolve", help="Resolve a photo id into a downloadable asset")
    resolve.add_argument("asset_id")

    commands.add_parser("filters", help="Print the available search filters")
    return parser


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    async with httpx.AsyncClient() as client:
        connector = UnsplashConnector.from_settings(client, settings)

        if args.command == "filters":
            _print(connector.get_available_filters(locale=args.locale))
            return 0

        if args.command == "search":
            result = await connector.search(
                {
                    "q": args.query,
                    "orientation": args.orientation,
                    "color": args.color,
                    "page": args.page,
                },
                locale=args.locale,
            )
            _print(result.model_dump(mode="json"))
            return 0 if result.success else 1

        payload = await connector.get_file_url_and_extension(args.asset_id)
        _print(payload)
        return 0 if payload else 1


def _print(payload) -> None:
    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    i18n = I18nService()
    if args.locale and not i18n.supports(args.locale):
        choices = ", ".join(i18n.available_locales())
        parser.error(f"unsupported locale {args.locale!r} (available: {choices})")
    try:
        return asyncio.run(run(args))
    except ConfigurationError as exc:
        logger.error("connector_misconfigured", error=str(exc))
        return 2


if __name__ == "__main__":
    sys.exit(main())
