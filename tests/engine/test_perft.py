from __future__ import annotations

import pytest

from queen_sweep.engine.board import Board
from queen_sweep.engine.layout import DEFAULT_LAYOUT
from queen_sweep.engine.perft import divide, perft


def test_perft_default_layout_depth_1() -> None:
    b = Board.from_layout(DEFAULT_LAYOUT)
    assert perft(b, 0) == 1
    assert perft(b, 1) == 2
    # Board is restored after counting
    assert b.to_layout()[0] == "QPPP...."


def test_perft_row_of_two(layout_of) -> None:
    b = Board.from_layout(layout_of((0, 1), [(0, 0), (0, 2)]))
    assert perft(b, 1) == 2
    assert perft(b, 2) == 2
    assert perft(b, 3) == 0


def test_divide_sums_to_perft() -> None:
    b = Board.from_layout(DEFAULT_LAYOUT)
    parts = divide(b, 3)
    assert set(parts) == {"b8", "a7"}
    assert sum(parts.values()) == perft(b, 3)


def test_negative_depth_raises() -> None:
    b = Board.from_layout(DEFAULT_LAYOUT)
    with pytest.raises(ValueError):
        perft(b, -1)
    with pytest.raises(ValueError):
        divide(b, 0)
