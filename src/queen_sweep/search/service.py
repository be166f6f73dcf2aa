from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from queen_sweep.engine.board import Board
from queen_sweep.engine.move import Move


logger = logging.getLogger(__name__)


Solution = Tuple[Move, ...]
SolutionCallback = Callable[[Solution], None]


@dataclass
class SearchResults:
    """Aggregate output of an exhaustive solve.

    ``branches_per_depth[i]`` is the number of legal moves summed over every
    position reached before move ``i + 1``.
    """

    pawn_count: int
    total_branches: int = 0
    branches_per_depth: List[int] = field(default_factory=list)
    solutions: List[Solution] = field(default_factory=list)
    nodes: int = 0
    time_ms: int = 0

    def __post_init__(self) -> None:
        if not self.branches_per_depth:
            self.branches_per_depth = [0] * self.pawn_count


def recurse(
    board: Board,
    moves: List[Move],
    left: int,
    results: SearchResults,
    on_solution: Optional[SolutionCallback] = None,
) -> None:
    """Enumerate every continuation of `moves` that clears the remaining `left` pawns.

    ``board`` is mutated with make/unmake and is back in its entry state when
    this returns. ``moves`` is used as a stack the same way.
    """
    results.nodes += 1
    available = board.next_moves()
    results.total_branches += len(available)
    results.branches_per_depth[results.pawn_count - left] += len(available)

    for m in available:
        board.make_move(m)
        moves.append(m)
        if left == 1:
            # Took the last pawn
            solution = tuple(moves)
            results.solutions.append(solution)
            if on_solution is not None:
                on_solution(solution)
        else:
            recurse(board, moves, left - 1, results, on_solution)
        moves.pop()
        board.unmake_move()


class SearchService:
    """Exhaustive depth-first solver.

    No pruning, no memoization and no move ordering: every legal continuation
    is explored, so solution order follows move generation order.
    """

    def solve(
        self,
        board: Board,
        *,
        on_solution: Optional[SolutionCallback] = None,
    ) -> SearchResults:
        pawns = board.pawn_count()
        results = SearchResults(pawn_count=pawns)
        start = time.perf_counter()
        if pawns > 0:
            # Work on a private copy so the caller's board and history stay untouched
            recurse(board.copy(), [], pawns, results, on_solution)
        results.time_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            "solve finished",
            extra={
                "pawns": pawns,
                "nodes": results.nodes,
                "branches": results.total_branches,
                "solutions": len(results.solutions),
                "time_ms": results.time_ms,
            },
        )
        return results


def replay(board: Board, solution: Sequence[Move]) -> List[Board]:
    """Return the board after each move of `solution`, starting from `board`.

    Raises:
        ValueError: If a move is not legal at its point in the sequence.
    """
    states: List[Board] = []
    current = board
    for m in solution:
        current = current.apply(m)
        states.append(current)
    return states


def verify_solution(board: Board, solution: Sequence[Move]) -> bool:
    """Check that `solution` is legal throughout and clears every pawn."""
    if len(solution) != board.pawn_count():
        return False
    try:
        states = replay(board, solution)
    except ValueError:
        return False
    return not states or states[-1].occupancy == 0
