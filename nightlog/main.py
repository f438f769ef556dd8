"""Command-line entry point: print the stats dashboard for a file of entries"""
import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from nightlog import config
from nightlog.exceptions import NightlogError
from nightlog.services.dashboard import build_dashboard
from nightlog.services.ingestion import load_records_json
from nightlog.utils.calendar_utils import parse_date

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize sleep entries for the last week or month")
    parser.add_argument("entries", type=Path, help="JSON file containing an array of entries")
    parser.add_argument(
        "--today",
        type=parse_date,
        default=None,
        help="Last day of the period (YYYY-MM-DD, defaults to the current date)",
    )
    parser.add_argument(
        "--period",
        choices=config.VALID_PERIODS,
        default=config.DEFAULT_PERIOD,
        help="Summary window",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main application entry point"""
    configure_logging()
    args = build_parser().parse_args(argv)

    try:
        config.validate_config()
        records = load_records_json(args.entries.read_text(encoding="utf-8"))
        # The only place the wall clock is read; everything below takes today explicitly
        today = args.today or date.today()
        dashboard = build_dashboard(records, today=today, period=args.period)
    except NightlogError as e:
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"Could not read {args.entries}: {e}")
        return 1

    print(dashboard.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
