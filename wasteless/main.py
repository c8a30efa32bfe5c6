import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from schedule_engine.config import CALENDAR_HORIZON_WEEKS, DEFAULT_HORIZON_WEEKS
from schedule_engine.facade import WasteScheduleFacade

from .app_factory import create_facade, initialize_app

logger = logging.getLogger(__name__)

LOOKUP_COMMANDS = ("next", "upcoming", "calendar", "validate", "remind")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="WasteLess collection schedule runner.")
    parser.add_argument(
        "command",
        choices=[*LOOKUP_COMMANDS, "bulky", "suburbs", "export"],
        help="The command to execute.",
    )
    parser.add_argument("--address", help="Street address, or part of it.")
    parser.add_argument("--suburb", help="Exact suburb name.")
    parser.add_argument(
        "--at",
        type=datetime.fromisoformat,
        help="Reference time in ISO format (default: now).",
    )
    parser.add_argument(
        "--weeks",
        type=int,
        help=(
            f"How many weeks ahead to look (default: {DEFAULT_HORIZON_WEEKS}, "
            f"or {CALENDAR_HORIZON_WEEKS} for calendar and export)."
        ),
    )
    parser.add_argument("--output", help="File to write the iCal export to.")
    return parser


def horizon(args: argparse.Namespace, default: int) -> int:
    return default if args.weeks is None else args.weeks


def print_lookup(command: str, summary: dict) -> None:
    if command == "next":
        for bin_type, when in summary["next_bin_dates"].items():
            print(f"{bin_type}: {when}")
        print(f"Days until next collection: {summary['days_until_next_collection']}")
        print(f"Next bins: {summary['next_collection_bins']}")
    elif command == "upcoming":
        for collection in summary["upcoming"]:
            print(collection)
    elif command == "calendar":
        for day, collections in summary["calendar"].items():
            bins = ", ".join(c.bin_type for c in collections)
            print(f"{day.isoformat()}: {bins}")
    elif command == "validate":
        print(summary["validation_message"])
    elif command == "remind":
        print(summary["reminder_message"] or "No reminder due.")


def run_command(facade: WasteScheduleFacade, args: argparse.Namespace) -> int:
    now = args.at or datetime.now()

    if args.command == "suburbs":
        for suburb in facade.get_available_suburbs():
            print(suburb)
        return 0

    if args.command == "bulky":
        for item in facade.get_bulky_waste_overview(now):
            print(f"{item['schedule_name']}: {item['next_collection']:%a, %b %d} ({item['frequency']})")
        return 0

    if args.command == "export":
        content = facade.export_calendar(args.address, now, horizon(args, CALENDAR_HORIZON_WEEKS))
        if content is None:
            print(f"No collections found for '{args.address}'.")
            return 1
        if args.output:
            with open(args.output, "wb") as f:
                f.write(content)
            print(f"Calendar written to {args.output}")
        else:
            sys.stdout.write(content.decode("utf-8"))
        return 0

    summary = facade.lookup_schedule(
        address=args.address,
        suburb=args.suburb,
        now=now,
        weeks=horizon(args, DEFAULT_HORIZON_WEEKS),
        calendar_weeks=horizon(args, CALENDAR_HORIZON_WEEKS),
    )
    if not summary["schedules"]:
        print(summary["status"])
        if summary["validation_message"]:
            print(summary["validation_message"])
        if summary["suggestions"]:
            print(f"Did you mean: {', '.join(summary['suggestions'])}?")
        return 1

    print_lookup(args.command, summary)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    initialize_app()
    args = build_parser().parse_args(argv)

    facade = create_facade()
    logger.info(f"Running command '{args.command}'.")
    return run_command(facade, args)


if __name__ == "__main__":
    sys.exit(main())
