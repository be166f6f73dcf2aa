from __future__ import annotations

import pytest

from queen_sweep.engine.board import Board
from queen_sweep.engine.layout import DEFAULT_LAYOUT
from queen_sweep.engine.move import Move


def test_make_unmake_restores_position() -> None:
    b = Board.from_layout(DEFAULT_LAYOUT)
    before = b.to_layout()
    for m in b.next_moves():
        b.make_move(m)
        assert b.to_layout() != before
        b.unmake_move()
        assert b.to_layout() == before
    assert (b.mover_row, b.mover_col) == (0, 0)


def test_nested_unmake_restores_in_reverse_order(layout_of) -> None:
    b = Board.from_layout(layout_of((0, 0), [(0, 1), (0, 2)]))
    start = b.copy()
    b.make_move(Move(0, 1))
    mid = b.copy()
    b.make_move(Move(0, 2))
    assert b.occupancy == 0
    b.unmake_move()
    assert b == mid
    b.unmake_move()
    assert b == start


def test_unmake_without_history_raises() -> None:
    b = Board.from_layout(DEFAULT_LAYOUT)
    with pytest.raises(ValueError):
        b.unmake_move()


def test_apply_returns_new_board_and_does_not_mutate() -> None:
    b = Board.from_layout(DEFAULT_LAYOUT)
    b2 = b.apply(Move(1, 0))
    assert b.to_layout()[0] == "QPPP...."
    assert b2.to_layout()[0] == ".PPP...."
    assert b2.to_layout()[1] == "Q....P.."
    assert b2.pawn_count() == 15


def test_apply_rejects_illegal_move() -> None:
    b = Board.from_layout(DEFAULT_LAYOUT)
    # (0, 2) is hidden behind (0, 1)
    with pytest.raises(ValueError, match="illegal move"):
        b.apply(Move(0, 2))
