from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .move import Move


SIZE = 8

PAWN = "P"
MOVER = "Q"
BLANKS = (" ", ".")

MOVER_GLYPH = "♛"
PAWN_GLYPH = "♟"
BLANK_GLYPH = "·"

# Ray directions as (d_row, d_col), scanned in this order by next_moves():
# west, east, north, south, north-east, south-east, south-west, north-west.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (1, 1),
    (1, -1),
    (-1, -1),
)


def _bit(row: int, col: int) -> int:
    return 1 << (row * SIZE + col)


@dataclass
class Board:
    """Pawn occupancy plus the position of the single mover.

    Notes:
    - Square (row, col) maps to bit ``row * 8 + col``; row 0 is the first
      line of the layout.
    - The mover's own square is never set in ``occupancy``.
    """

    occupancy: int
    mover_row: int
    mover_col: int
    # undo stack for make/unmake: (prev_row, prev_col, cleared_bit)
    _history: List[Tuple[int, int, int]] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_layout(cls, rows: Sequence[str]) -> "Board":
        """Create a board from an 8x8 character layout.

        Args:
            rows (Sequence[str]): Eight strings of eight characters each. ``P``
                marks a pawn, ``Q`` the mover, and a space or ``.`` a blank.

        Returns:
            Board: Board with every pawn marker set in ``occupancy``.

        Raises:
            ValueError: If the layout is not 8 rows of 8 characters, contains
                an unknown character, or does not have exactly one mover.
        """
        if isinstance(rows, str) or len(rows) != SIZE:
            raise ValueError(f"layout must have {SIZE} rows")
        occupancy = 0
        mover: Tuple[int, int] | None = None
        for row_idx, row in enumerate(rows):
            if len(row) != SIZE:
                raise ValueError(f"layout row {row_idx} must have {SIZE} squares, got {len(row)}")
            for col_idx, ch in enumerate(row):
                if ch == PAWN:
                    occupancy |= _bit(row_idx, col_idx)
                elif ch == MOVER:
                    if mover is not None:
                        raise ValueError("layout has more than one mover")
                    mover = (row_idx, col_idx)
                elif ch not in BLANKS:
                    raise ValueError(f"invalid character in layout: {ch!r}")
        if mover is None:
            raise ValueError("layout has no mover")
        return cls(occupancy=occupancy, mover_row=mover[0], mover_col=mover[1])

    def to_layout(self) -> List[str]:
        """Serialize the board back into layout rows (``.`` for blanks)."""
        return self.render(mover=MOVER, pawn=PAWN, blank=".")

    def copy(self) -> "Board":
        return Board(
            occupancy=self.occupancy,
            mover_row=self.mover_row,
            mover_col=self.mover_col,
        )

    def occupied(self, row: int, col: int) -> bool:
        """Return True if a pawn stands on (row, col).

        Coordinates come from the 8x8 grid by construction; anything else is a
        caller bug.
        """
        assert 0 <= row < SIZE and 0 <= col < SIZE, f"square out of range: ({row}, {col})"
        return (self.occupancy >> (row * SIZE + col)) & 1 == 1

    def pawn_count(self) -> int:
        return bin(self.occupancy).count("1")

    def move_to(self, row: int, col: int) -> None:
        """Relocate the mover to (row, col) and remove the pawn there."""
        self.mover_row = row
        self.mover_col = col
        self.occupancy &= ~_bit(row, col)

    def next_moves(self) -> List[Move]:
        """Return the nearest pawn along each of the eight rays.

        Returns:
            List[Move]: At most one move per direction, in ``DIRECTIONS``
                order. Pawns behind the nearest one are not reachable.
        """
        moves: List[Move] = []
        for dr, dc in DIRECTIONS:
            r, c = self.mover_row, self.mover_col
            while True:
                r += dr
                c += dc
                if not (0 <= r < SIZE and 0 <= c < SIZE):
                    break
                if (self.occupancy >> (r * SIZE + c)) & 1:
                    moves.append(Move(r, c))
                    break
        return moves

    def apply(self, move: Move) -> "Board":
        """Return a new Board with `move` applied if legal.

        This board is left unchanged.

        Raises:
            ValueError: If ``move`` is not among ``next_moves()``.
        """
        if move not in self.next_moves():
            raise ValueError("illegal move")
        new_board = self.copy()
        new_board.move_to(move.row, move.col)
        return new_board

    def make_move(self, move: Move) -> None:
        """Apply `move` in-place, recording what unmake_move() needs to undo it."""
        cleared = self.occupancy & _bit(move.row, move.col)
        self._history.append((self.mover_row, self.mover_col, cleared))
        self.move_to(move.row, move.col)

    def unmake_move(self) -> None:
        """Undo the last make_move(), restoring the pawn and mover position."""
        if not self._history:
            raise ValueError("no move to unmake")
        prev_row, prev_col, cleared = self._history.pop()
        self.occupancy |= cleared
        self.mover_row = prev_row
        self.mover_col = prev_col

    def render(
        self,
        *,
        mover: str = MOVER_GLYPH,
        pawn: str = PAWN_GLYPH,
        blank: str = BLANK_GLYPH,
    ) -> List[str]:
        """Render the board as one string per row."""
        rows: List[str] = []
        for row in range(SIZE):
            chars = []
            for col in range(SIZE):
                if row == self.mover_row and col == self.mover_col:
                    chars.append(mover)
                elif self.occupied(row, col):
                    chars.append(pawn)
                else:
                    chars.append(blank)
            rows.append("".join(chars))
        return rows
