"""
Combodate - Main Entry Point.

Prints the current moment as Unix time, ISO-8601 Gregorian and week-date
(local and UTC), and the proportion of the local day, week, month and
year elapsed.

Usage:
    python main.py
"""

import argparse
import sys
from typing import List, Optional

from combodate import __version__
from combodate.clock import local_now
from combodate.errors import ClockUnavailableError
from combodate.log import get_logger, setup_logging
from combodate.report import make_combodate_table


logger = get_logger("main")


def build_parser() -> argparse.ArgumentParser:
    """Builds the command-line parser; it accepts no table options."""
    parser = argparse.ArgumentParser(
        prog="combodate",
        description="Combodate - The current moment in several formats at once"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, 1 if the clock cannot be read).
    """
    build_parser().parse_args(argv)
    setup_logging()

    try:
        now = local_now()
    except ClockUnavailableError as e:
        logger.error("clock_unavailable", reason=str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    table = make_combodate_table(now)
    sys.stdout.write(table)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
