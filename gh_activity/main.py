"""
Command-line entry point.

Usage:
    gh-activity [--type TYPE] [--limit N] [--detailed] <username>
    gh-activity --list-types
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from gh_activity.config import settings
from gh_activity.services.activity import (
    ActivityError,
    ActivityOptions,
    ActivityService,
    ActivitySummary,
    DetailedActivity,
    create_activity_service,
)
from gh_activity.services.github import available_event_types, close_github_client

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    # stdout carries the activity listing, logs go to stderr
    logging.basicConfig(
        level=level.upper(),
        format=log_format,
        datefmt=date_format,
        stream=sys.stderr,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("hpack").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gh-activity",
        description="Show the recent public GitHub activity of a user.",
        epilog=(
            "examples:\n"
            "  gh-activity kamranahmedse\n"
            "  gh-activity --type PushEvent --limit 5 torvalds\n"
            "  gh-activity --detailed octocat\n"
            "  gh-activity --list-types"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("username", nargs="?", help="GitHub username")
    parser.add_argument(
        "--type",
        default="",
        help="Filter by event type (e.g., PushEvent, IssuesEvent)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=settings.default_limit,
        help=f"Limit the number of events displayed (default {settings.default_limit})",
    )
    parser.add_argument(
        "--detailed",
        action="store_true",
        help="Show detailed information for each event",
    )
    parser.add_argument(
        "--list-types",
        action="store_true",
        help="List all available event types",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show how many events of each type the feed contains",
    )
    parser.add_argument(
        "--repos",
        action="store_true",
        help="List recently active repositories (capped by --limit)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def print_event_types() -> None:
    """Print the event type catalogue with aligned descriptions."""
    event_types = available_event_types()
    width = max(len(event_type.value) for event_type in event_types) + 2

    print("Available event types:")
    for event_type in sorted(event_types, key=lambda t: t.value):
        print(f"  {event_type.value:<{width}} - {event_types[event_type]}")


def print_activities(activities: Sequence[ActivitySummary]) -> None:
    for activity in activities:
        print(f"- {activity.description}")


def print_detailed_activities(activities: Sequence[DetailedActivity]) -> None:
    for activity in activities:
        print(f"- {activity.description}")
        print(f"  Time: {activity.timestamp}")
        print(f"  Type: {activity.type}")

        if activity.commits:
            print("  Commits:")
            for commit in activity.commits:
                print(f"    - {commit.sha}: {commit.message}")

        for key in sorted(activity.details):
            label = key.replace("_", " ")
            print(f"  {label[:1].upper() + label[1:]}: {activity.details[key]}")

        print()


def _print_empty(options: ActivityOptions) -> None:
    if options.event_type:
        print(f"No '{options.event_type}' events found.")
    else:
        print("No recent activity found.")


async def display(
    service: ActivityService,
    username: str,
    options: ActivityOptions,
    *,
    stats: bool = False,
    repos: bool = False,
) -> None:
    """Run the requested query and print its result."""
    if stats:
        counts = await service.statistics(username)
        if not counts:
            _print_empty(ActivityOptions())
            return
        width = max(len(event_type) for event_type in counts) + 2
        print("Event statistics:")
        for event_type, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
            print(f"  {event_type:<{width}} {count}")
        return

    if repos:
        names = await service.recent_repositories(username, options.limit)
        if not names:
            _print_empty(ActivityOptions())
            return
        print("Recently active repositories:")
        for name in names:
            print(f"- {name}")
        return

    event_filter = options.to_filter()
    if options.detailed:
        detailed = await service.get_user_activity_detailed(username, event_filter)
        if not detailed:
            _print_empty(options)
            return
        print_detailed_activities(detailed)
        return

    summaries = await service.get_user_activity(username, event_filter)
    if not summaries:
        _print_empty(options)
        return
    print_activities(summaries)


async def _run_async(args: argparse.Namespace, options: ActivityOptions) -> None:
    service = create_activity_service()
    try:
        await display(service, args.username, options, stats=args.stats, repos=args.repos)
    finally:
        await close_github_client()


def run(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    if args.list_types:
        print_event_types()
        return 0

    if not args.username:
        parser.print_help()
        return 1

    options = ActivityOptions(event_type=args.type, limit=args.limit, detailed=args.detailed)
    try:
        options.validate()
    except ActivityError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Fetching GitHub activity for user: {args.username}\n")

    try:
        asyncio.run(_run_async(args, options))
    except ActivityError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
