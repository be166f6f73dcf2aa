#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import time
import os
import sys
from typing import List, Optional

# Allow running this script directly via `python scripts/perft.py`
# by adding the repo's src/ to sys.path.
SRC_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from queen_sweep.engine.board import Board
from queen_sweep.engine.layout import DEFAULT_LAYOUT, load_layout
from queen_sweep.engine.perft import divide, perft


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Count move sequences of a given depth")
    parser.add_argument("--layout", type=str, default=None, help="Layout file (default: built-in puzzle)")
    parser.add_argument("--depth", type=_non_negative_int, default=3, help="Perft depth (default: 3)")
    parser.add_argument("--divide", action="store_true", help="Break the count down by first move")
    args = parser.parse_args(argv)
    if args.divide and args.depth < 1:
        parser.error("--divide needs --depth >= 1")

    try:
        board = Board.from_layout(load_layout(args.layout) if args.layout else DEFAULT_LAYOUT)
    except (OSError, ValueError) as e:
        parser.error(f"bad layout: {e}")

    start = time.perf_counter()
    if args.divide:
        parts = divide(board, args.depth)
        for square, count in parts.items():
            print(f"{square}: {count}")
        nodes = sum(parts.values())
    else:
        nodes = perft(board, args.depth)
    dt = time.perf_counter() - start
    print(f"nodes={nodes} depth={args.depth} time_ms={int(dt*1000)} nps={int(nodes/max(dt,1e-9))}")


if __name__ == "__main__":
    main()
