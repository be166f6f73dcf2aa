from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


FILES = "abcdefgh"


@dataclass(frozen=True)
class Move:
    """Target square the mover slides to.

    Attributes:
        row (int): Layout row, 0 is the first line of the layout.
        col (int): Layout column, 0 is the leftmost character.
    """

    row: int
    col: int

    def to_algebraic(self) -> str:
        """Serialize the target square into algebraic notation.

        Returns:
            str: Square like ``"b8"`` for ``Move(0, 1)``.
        """
        return square_to_str(self.row, self.col)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


def parse_square(s: str) -> Move:
    """Parse an algebraic square into a move targeting it.

    Args:
        s (str): Square name such as ``"e4"``.

    Returns:
        Move: Move whose target is ``s``.

    Raises:
        ValueError: If ``s`` is not a valid square.
    """
    if len(s) != 2 or s[0] not in FILES or s[1] < "1" or s[1] > "8":
        raise ValueError(f"invalid square: {s!r}")
    col = FILES.index(s[0])
    row = 8 - int(s[1])
    return Move(row, col)


def square_to_str(row: int, col: int) -> str:
    """Convert layout coordinates into algebraic notation.

    Row 0 is rank 8 so the first layout line reads as the top of the board.

    Raises:
        ValueError: If either coordinate is outside 0..7.
    """
    if not (0 <= row < 8 and 0 <= col < 8):
        raise ValueError(f"invalid square coordinates: ({row}, {col})")
    return FILES[col] + str(8 - row)
