"""Command line front end for the leaderboard client."""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path

from simpleleaderboard.services.config import ClientSettings, ClientSettingsManager
from simpleleaderboard.services.config.client_settings import (
    DEFAULT_SETTINGS_PATH,
    env_overrides,
)
from simpleleaderboard.services.leaderboard import (
    Entry,
    LeaderboardClient,
    format_score,
    parse_entries,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simpleleaderboard",
        description="Submit and retrieve leaderboard entries.",
    )
    parser.add_argument("--base-url", default="", help="e.g. https://mysimpleleaderboard.com")
    parser.add_argument("--default-path", default="", help="e.g. /scores")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help=f"seconds (default {ClientSettings.DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument("--settings", type=Path, default=DEFAULT_SETTINGS_PATH)
    parser.add_argument("-v", "--verbose", action="store_true")

    commands = parser.add_subparsers(dest="command", required=True)

    get = commands.add_parser("get", help="List all submitted entries")
    get.add_argument("--path", default=None)
    get.add_argument(
        "--entries", action="store_true", help="Print one line per entry instead of raw JSON"
    )

    post = commands.add_parser("post", help="Submit a score")
    post.add_argument("name")
    post.add_argument("score", type=float)
    post.add_argument("--id", default=None, help="Update an existing entry")
    post.add_argument(
        "--timestamp",
        type=datetime.fromisoformat,
        default=None,
        help="ISO-8601 time the score was achieved",
    )
    post.add_argument("--path", default=None)
    return parser


def load_settings(args: argparse.Namespace) -> ClientSettings:
    """Settings file, then environment, then command line flags."""
    settings = ClientSettingsManager(settings_path=args.settings).load()
    settings = settings.merged(**env_overrides())
    return settings.merged(
        base_url=args.base_url,
        default_path=args.default_path,
        timeout=args.timeout,
    )


async def _run_get(client: LeaderboardClient, args: argparse.Namespace) -> int:
    result = await client.get(args.path)
    if not result.ok:
        print("Did not get any submissions.", file=sys.stderr)
        return 1

    if not args.entries:
        print(result.body)
        return 0

    try:
        entries = parse_entries(result.body)
    except ValueError as exc:
        print(f"Invalid response: {exc}", file=sys.stderr)
        return 1
    for entry in entries:
        print(f"{entry.name}\t{format_score(entry.score)}")
    return 0


async def _run_post(client: LeaderboardClient, args: argparse.Namespace) -> int:
    entry = Entry(name=args.name, score=args.score, id=args.id, timestamp=args.timestamp)
    entry_id = await client.submit_entry(entry, args.path)
    if not entry_id:
        print("Did not store submission correctly.", file=sys.stderr)
        return 1
    print(entry_id)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the command line."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args)
    except ValueError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 1

    client = LeaderboardClient(settings)
    if args.command == "get":
        return asyncio.run(_run_get(client, args))
    return asyncio.run(_run_post(client, args))
