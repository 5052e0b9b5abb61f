"""
Demo entry point: the calculator menu on the terminal.

Usage:
    menuflow-demo [--no-greeting] [--log-level DEBUG]
    python -m menuflow.app.main
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from ..data.calculator import build_calculator
from .dependencies import create_console, get_settings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the menuflow calculator demo.")
    parser.add_argument(
        "--no-greeting",
        action="store_true",
        help="Skip the greeting printed at start-up.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for menuflow's own logs (default: MENUFLOW_LOG_LEVEL or WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    level = (args.log_level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console = create_console()
    if args.no_greeting:
        console.greeting_text = ""
    build_calculator(console)
    console.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
