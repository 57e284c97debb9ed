"""
Job Board - Application timeline generator

Entry point: prints the timeline for a status and its timestamps as JSON.

Usage:
    python -m src.main reviewing 2024-01-01T00:00:00Z 2024-01-03T09:30:00Z --metadata
"""

import argparse
import json
import logging
import sys
from typing import Optional


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="Print the application timeline for a status as JSON",
    )
    parser.add_argument("status", help="Application status (pending, reviewing, ...)")
    parser.add_argument("applied_at", help="ISO-8601 submission timestamp")
    parser.add_argument(
        "updated_at",
        nargs="?",
        default=None,
        help="ISO-8601 timestamp of the last status change (defaults to applied_at)",
    )
    parser.add_argument(
        "--metadata",
        action="store_true",
        help="Include flow description and progress",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override JOBBOARD_LOG_LEVEL",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Parse arguments, build the timeline and print it."""
    args = build_parser().parse_args(argv)

    from src.config.settings import settings
    from src.domain.services.timeline_service import TimelineService

    setup_logging(args.log_level or settings.log_level)

    service = TimelineService(settings)
    timeline = service.generate_timeline(
        args.status,
        args.applied_at,
        args.updated_at or args.applied_at,
        include_metadata=args.metadata or None,
    )
    print(json.dumps(timeline.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
