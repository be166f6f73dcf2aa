from __future__ import annotations

import logging
from typing import List

from .board import SIZE


logger = logging.getLogger(__name__)


# Sixteen-pawn puzzle the solver ships with.
DEFAULT_LAYOUT: List[str] = [
    "QPPP    ",
    "P    P  ",
    "P      P",
    " P    P ",
    "P     P ",
    "P     P ",
    "  P     ",
    "P   P   ",
]


def parse_layout(text: str) -> List[str]:
    """Split layout text into board rows.

    Trailing blank lines are dropped and short lines are padded with blanks,
    since editors tend to strip trailing spaces. Row count and over-long rows
    are validated by ``Board.from_layout``.
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return [line.ljust(SIZE) for line in lines]


def load_layout(path: str) -> List[str]:
    """Read a layout file (UTF-8).

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    rows = parse_layout(text)
    logger.debug("loaded layout", extra={"path": path, "rows": len(rows)})
    return rows
