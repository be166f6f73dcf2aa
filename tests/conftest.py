import os
import sys
from typing import Iterable, List, Tuple

import pytest


# Make `queen_sweep` importable from src/ without installing the package
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_PATH = os.path.abspath(os.path.join(REPO_ROOT, "src"))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)


def build_layout(mover: Tuple[int, int], pawns: Iterable[Tuple[int, int]]) -> List[str]:
    grid = [["."] * 8 for _ in range(8)]
    for r, c in pawns:
        grid[r][c] = "P"
    grid[mover[0]][mover[1]] = "Q"
    return ["".join(row) for row in grid]


@pytest.fixture
def layout_of():
    """Build layout rows from a mover square and pawn squares."""
    return build_layout
