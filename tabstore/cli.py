"""
Console entry point: bootstrap the demo file, load, render, analyze.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .console import configure_logging
from .demo import ensure_demo_file
from .settings import LOG_LEVELS, get_settings
from .store import TabularStore


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabstore",
        description="Print a comma-delimited table and its total estimated revenue",
    )
    parser.add_argument("--path", type=Path, help="table file to load (default: settings data_path)")
    parser.add_argument("--width", type=positive_int, help="fixed column width")
    parser.add_argument("--no-demo", action="store_true", help="do not create the demo file when the path is missing")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as e:
        parser.error(f"invalid TABSTORE_* configuration:\n{e}")

    configure_logging(args.log_level or settings.log_level)

    path = args.path or settings.data_path
    width = args.width if args.width is not None else settings.column_width

    if settings.create_demo and not args.no_demo:
        ensure_demo_file(path)

    store = TabularStore(column_width=width, currency_symbol=settings.currency_symbol)
    if store.load(path):
        store.render_table(sys.stdout)
        store.calculate_total_revenue(sys.stdout)

    # A failed load is reported above; the exit status stays 0.
    return 0


if __name__ == "__main__":
    sys.exit(main())
