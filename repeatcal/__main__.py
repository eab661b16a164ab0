"""Command-line entry for repeatcal.

Prints the occurrence dates of a recurrence, one per line, as a JSON array,
or as an RRULE string.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional, Sequence

import yaml

from .config_loader import load_config
from .exceptions import RecurrenceValidationError
from .logging_config import configure_logging
from .models import RepeatType
from .recurrence import RecurrenceRequest, build_rrule_string, generate_occurrences

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 1
EXIT_VALIDATION_ERROR = 2


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for repeatcal CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="repeatcal",
        description="repeatcal - list the dates of a repeating calendar event",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m repeatcal 2025-01-01 --repeat daily --interval 3 --until 2025-01-05
  python -m repeatcal 2025-01-31 --repeat monthly --until 2025-04-30 --json
  python -m repeatcal 2024-02-29 --repeat yearly --until 2025-12-31 --rrule
        """,
    )

    parser.add_argument("start", help="Anchor date, YYYY-MM-DD")
    parser.add_argument(
        "--repeat",
        choices=[t.value for t in RepeatType],
        default=RepeatType.DAILY.value,
        help="Repeat cadence (default: daily)",
    )
    parser.add_argument("--interval", type=int, default=1, metavar="N", help="Cadence step (default: 1)")
    parser.add_argument("--until", required=True, metavar="DATE", help="End date, YYYY-MM-DD")
    parser.add_argument("--config", metavar="PATH", help="Path to a repeatcal YAML config file")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print dates as a JSON array")
    output.add_argument("--rrule", action="store_true", help="Print the equivalent RRULE instead of dates")

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the repeatcal CLI.

    Returns:
        Process exit code: 0 on success, 1 on a config error, 2 on a validation error
    """
    args = _create_parser().parse_args(argv)
    configure_logging(debug_mode=args.debug)

    try:
        cfg = load_config(args.config)
    except (ValueError, yaml.YAMLError) as exc:
        logger.debug("Config load failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    # --debug and REPEATCAL_LOG_LEVEL take precedence over the config file
    if not args.debug and not os.getenv("REPEATCAL_LOG_LEVEL"):
        logging.getLogger().setLevel(getattr(logging, cfg.log_level, logging.INFO))

    request = RecurrenceRequest(
        start_date=args.start,
        cadence=RepeatType(args.repeat),
        interval=args.interval,
        end_date=args.until,
    )

    try:
        if args.rrule:
            print(build_rrule_string(request, cfg.recurrence_config()))
            return 0
        dates = generate_occurrences(request, cfg.recurrence_config())
    except RecurrenceValidationError as exc:
        logger.debug("Validation failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ValueError as exc:
        # build_rrule_string rejects non-repeating requests
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if args.json:
        print(json.dumps([d.isoformat() for d in dates]))
    else:
        for d in dates:
            print(d.isoformat())
    return 0


if __name__ == "__main__":
    sys.exit(main())
