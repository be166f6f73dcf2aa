#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

# Allow running this script directly via `python scripts/solve.py`
# by adding the repo's src/ to sys.path.
SRC_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from queen_sweep.display.printer import format_solution, format_stats, terminal_width
from queen_sweep.engine.board import Board
from queen_sweep.engine.layout import DEFAULT_LAYOUT, load_layout
from queen_sweep.search.service import SearchService


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Enumerate every way for the queen to clear all pawns")
    parser.add_argument("--layout", type=str, default=None, help="Layout file (default: built-in puzzle)")
    parser.add_argument("--quiet", action="store_true", help="Print statistics only")
    parser.add_argument("--limit", type=_non_negative_int, default=None, help="Print at most N solutions")
    parser.add_argument("--width", type=int, default=None, help="Output width (default: terminal width)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level)

    try:
        rows = load_layout(args.layout) if args.layout else DEFAULT_LAYOUT
        board = Board.from_layout(rows)
    except (OSError, ValueError) as e:
        parser.error(f"bad layout: {e}")

    res = SearchService().solve(board)

    if not args.quiet:
        width = args.width or terminal_width()
        shown = res.solutions if args.limit is None else res.solutions[: args.limit]
        for i, sol in enumerate(shown, start=1):
            print("\n".join(format_solution(board, sol, i, width)))

    print("\n".join(format_stats(res)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
