from __future__ import annotations

from queen_sweep.engine.board import DIRECTIONS, Board
from queen_sweep.engine.layout import DEFAULT_LAYOUT
from queen_sweep.engine.move import Move


def test_nearest_pawn_per_direction_in_fixed_order(layout_of) -> None:
    pawns = [
        (4, 1), (4, 0),  # west, (4, 0) hidden
        (4, 7),  # east
        (1, 4), (0, 4),  # north, (0, 4) hidden
        (6, 4),  # south
        (2, 6), (1, 7),  # north-east, (1, 7) hidden
        (7, 7),  # south-east
        (5, 3),  # south-west
    ]
    b = Board.from_layout(layout_of((4, 4), pawns))
    assert b.next_moves() == [
        Move(4, 1),
        Move(4, 7),
        Move(1, 4),
        Move(6, 4),
        Move(2, 6),
        Move(7, 7),
        Move(5, 3),
    ]


def test_pawn_behind_nearest_is_unreachable(layout_of) -> None:
    b = Board.from_layout(layout_of((0, 0), [(0, 1), (0, 2)]))
    assert b.next_moves() == [Move(0, 1)]
    b.move_to(0, 1)
    assert b.next_moves() == [Move(0, 2)]


def test_eight_neighbours_give_eight_moves(layout_of) -> None:
    around = [(r, c) for r in (2, 3, 4) for c in (2, 3, 4) if (r, c) != (3, 3)]
    b = Board.from_layout(layout_of((3, 3), around))
    moves = b.next_moves()
    assert len(moves) == 8
    assert moves == [Move(3 + dr, 3 + dc) for dr, dc in DIRECTIONS]


def test_no_pawns_no_moves(layout_of) -> None:
    b = Board.from_layout(layout_of((5, 2), []))
    assert b.next_moves() == []


def test_corner_mover_rays_run_off_board(layout_of) -> None:
    # Knight-distance pawn is on no ray
    b = Board.from_layout(layout_of((7, 7), [(5, 6)]))
    assert b.next_moves() == []


def test_next_moves_is_pure() -> None:
    b = Board.from_layout(DEFAULT_LAYOUT)
    snapshot = (b.occupancy, b.mover_row, b.mover_col)
    b.next_moves()
    assert (b.occupancy, b.mover_row, b.mover_col) == snapshot


def _between_is_empty(b: Board, m: Move) -> bool:
    dr = (m.row > b.mover_row) - (m.row < b.mover_row)
    dc = (m.col > b.mover_col) - (m.col < b.mover_col)
    r, c = b.mover_row + dr, b.mover_col + dc
    while (r, c) != (m.row, m.col):
        if b.occupied(r, c):
            return False
        r += dr
        c += dc
    return True


def _walk(b: Board, depth: int) -> None:
    moves = b.next_moves()
    targets = set()
    for m in moves:
        dr, dc = m.row - b.mover_row, m.col - b.mover_col
        # On a rank, file or diagonal
        assert dr == 0 or dc == 0 or abs(dr) == abs(dc)
        assert b.occupied(m.row, m.col)
        assert _between_is_empty(b, m)
        direction = ((dr > 0) - (dr < 0), (dc > 0) - (dc < 0))
        assert direction not in targets
        targets.add(direction)
    if depth == 0:
        return
    for m in moves:
        b.make_move(m)
        _walk(b, depth - 1)
        b.unmake_move()


def test_generated_moves_are_nearest_along_distinct_rays() -> None:
    _walk(Board.from_layout(DEFAULT_LAYOUT), 5)
