"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from numberstacks.config import DEFAULT_NUMBER, INPUT_MAX, INPUT_MIN
from numberstacks.logging_config import setup_logging


def number_in_range(text: str) -> int:
    """argparse type: an integer within the input range."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{text}' is not an integer") from None
    if not INPUT_MIN <= value <= INPUT_MAX:
        raise argparse.ArgumentTypeError(f"{value} is outside {INPUT_MIN}..{INPUT_MAX}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="numberstacks",
        description="Show the factor pairs of a number as coloured stacks of squares.",
    )
    ap.add_argument("-n", "--number", type=number_in_range, default=DEFAULT_NUMBER,
                    help=f"number shown on start-up ({INPUT_MIN}..{INPUT_MAX}, default {DEFAULT_NUMBER})")
    ap.add_argument("--debug", action="store_true", help="log every recomputation")
    ap.add_argument("--log-file", default=None, help="also write the log to this file")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # Qt is imported only once the arguments are valid
    from numberstacks.app.main import main as run_app
    return run_app(args.number)


if __name__ == "__main__":
    sys.exit(main())
