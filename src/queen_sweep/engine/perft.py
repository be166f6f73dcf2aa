from __future__ import annotations

from typing import Dict

from .board import Board


def perft(board: Board, depth: int) -> int:
    """Count move sequences of exactly `depth` moves from `board`.

    Definition:
    - depth == 0 returns 1 (the current node).
    - depth > 0 returns the sum over all child positions' perft(depth-1).

    The count for depth ``d`` equals the branch count the solver records for
    move ``d``, which makes this a cross-check for the search statistics.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if depth == 0:
        return 1

    nodes = 0
    for m in board.next_moves():
        board.make_move(m)
        nodes += perft(board, depth - 1)
        board.unmake_move()
    return nodes


def divide(board: Board, depth: int) -> Dict[str, int]:
    """Return perft(depth-1) for each first move, keyed by algebraic square."""
    if depth < 1:
        raise ValueError("depth must be >= 1")
    counts: Dict[str, int] = {}
    for m in board.next_moves():
        counts[m.to_algebraic()] = perft(board.apply(m), depth - 1)
    return counts
