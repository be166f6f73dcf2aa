from __future__ import annotations

import shutil
from typing import List, Sequence, Tuple

from ..engine.board import Board, SIZE
from ..engine.move import Move
from ..search.service import SearchResults, replay


# (title, rows) pairs laid out left-to-right
Block = Tuple[str, List[str]]

DEFAULT_GAP = 3


def terminal_width(fallback: int = 80) -> int:
    return shutil.get_terminal_size((fallback, 24)).columns


def render_board(board: Board) -> List[str]:
    return board.render()


def format_side_by_side(blocks: Sequence[Block], width: int, gap: int = DEFAULT_GAP) -> List[str]:
    """Lay out titled blocks in bands that fit within `width` columns.

    Each block is as wide as its widest line (title included). A block that is
    wider than ``width`` on its own still gets a band to itself.
    """
    lines: List[str] = []
    band: List[Block] = []
    band_width = 0
    for block in blocks:
        w = _block_width(block)
        needed = w if not band else band_width + gap + w
        if band and needed > width:
            lines.extend(_format_band(band, gap))
            band, band_width = [], 0
            needed = w
        band.append(block)
        band_width = needed
    if band:
        lines.extend(_format_band(band, gap))
    return lines


def _block_width(block: Block) -> int:
    title, rows = block
    return max([len(title)] + [len(r) for r in rows])


def _format_band(band: Sequence[Block], gap: int) -> List[str]:
    widths = [_block_width(b) for b in band]
    height = max(len(rows) for _, rows in band)
    sep = " " * gap
    out = [sep.join(title.ljust(w) for (title, _), w in zip(band, widths)).rstrip()]
    for i in range(height):
        cells = []
        for (_, rows), w in zip(band, widths):
            cells.append((rows[i] if i < len(rows) else "").ljust(w))
        out.append(sep.join(cells).rstrip())
    out.append("")
    return out


def format_solution(
    board: Board,
    solution: Sequence[Move],
    index: int,
    width: int,
    gap: int = DEFAULT_GAP,
) -> List[str]:
    """Format one solution as its sequence of intermediate boards.

    Args:
        board (Board): Starting position.
        solution (Sequence[Move]): Moves to replay from ``board``.
        index (int): 1-based solution number used in the heading.
        width (int): Available columns for the board bands.
    """
    blocks: List[Block] = []
    for k, (m, state) in enumerate(zip(solution, replay(board, solution)), start=1):
        blocks.append((f"{k}. {m.to_algebraic()}", render_board(state)))
    lines = [f"=== Solution {index} ==="]
    lines.extend(format_side_by_side(blocks, max(width, SIZE), gap))
    return lines


def format_stats(results: SearchResults) -> List[str]:
    lines = [
        f"pawns={results.pawn_count} branches={results.total_branches} "
        f"nodes={results.nodes} solutions={len(results.solutions)} time_ms={results.time_ms}",
    ]
    for depth, count in enumerate(results.branches_per_depth, start=1):
        lines.append(f"move {depth:2d}: {count} branches")
    return lines
