from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field

from .error import (
    exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
)
from .logging_middleware import RequestIDLoggingMiddleware
from ...engine.board import Board
from ...engine.layout import DEFAULT_LAYOUT
from ...engine.move import square_to_str
from ...engine.perft import perft as perft_nodes
from ...search.service import SearchService, replay


logger = logging.getLogger(__name__)


class LayoutRequest(BaseModel):
    layout: List[str] = Field(
        default_factory=lambda: list(DEFAULT_LAYOUT),
        description="Eight rows of eight characters: P pawn, Q mover, space or . blank",
    )


class MovesResponse(BaseModel):
    mover: str
    pawn_count: int
    legal_moves: list[str]
    board: list[str]


class SolveRequest(LayoutRequest):
    include_boards: bool = Field(default=False, description="Attach every intermediate board")
    max_solutions: Optional[int] = Field(default=None, ge=0, description="Cap on returned solutions")


class SolutionModel(BaseModel):
    moves: list[str]
    boards: Optional[list[list[str]]] = None


class SolveResponse(BaseModel):
    pawn_count: int
    total_branches: int
    branches_per_depth: list[int]
    nodes: int
    time_ms: int
    solution_count: int
    solutions: list[SolutionModel]


class PerftRequest(LayoutRequest):
    depth: int = Field(default=1, ge=0, le=63)


# Largest search depth (pawn count) the HTTP surface will explore
DEFAULT_MAX_PAWNS = 20


def create_app(max_pawns: int = DEFAULT_MAX_PAWNS) -> FastAPI:
    app = FastAPI(title="Queen Sweep Solver API", version="0.1.0")

    logging.basicConfig(level=logging.INFO)

    app.add_middleware(RequestIDLoggingMiddleware)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, exception_handler)

    @app.get("/healthz")
    async def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/moves", response_model=MovesResponse)
    async def moves(req: LayoutRequest) -> MovesResponse:
        board = _require_board(req.layout)
        return MovesResponse(
            mover=square_to_str(board.mover_row, board.mover_col),
            pawn_count=board.pawn_count(),
            legal_moves=[m.to_algebraic() for m in board.next_moves()],
            board=board.to_layout(),
        )

    # Plain def: the solve is CPU-bound, so FastAPI runs it in the threadpool
    @app.post("/api/solve", response_model=SolveResponse)
    def solve(req: SolveRequest) -> SolveResponse:
        board = _require_board(req.layout)
        _check_search_size(board.pawn_count(), max_pawns)
        res = SearchService().solve(board)
        kept = res.solutions if req.max_solutions is None else res.solutions[: req.max_solutions]
        solutions = []
        for sol in kept:
            boards = None
            if req.include_boards:
                boards = [state.to_layout() for state in replay(board, sol)]
            solutions.append(SolutionModel(moves=[m.to_algebraic() for m in sol], boards=boards))
        return SolveResponse(
            pawn_count=res.pawn_count,
            total_branches=res.total_branches,
            branches_per_depth=res.branches_per_depth,
            nodes=res.nodes,
            time_ms=res.time_ms,
            solution_count=len(res.solutions),
            solutions=solutions,
        )

    @app.post("/api/perft")
    def perft(req: PerftRequest) -> Dict[str, int]:
        board = _require_board(req.layout)
        _check_search_size(min(req.depth, board.pawn_count()), max_pawns)
        return {"nodes": perft_nodes(board, req.depth)}

    return app


def _require_board(layout: List[str]) -> Board:
    try:
        return Board.from_layout(layout)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _check_search_size(depth: int, max_pawns: int) -> None:
    if depth > max_pawns:
        raise HTTPException(
            status_code=400, detail=f"search depth {depth} exceeds the limit of {max_pawns} pawns"
        )
