"""Square value type and coordinate helpers.

Board layout (row-major, as the board is drawn):
    row 0 = rank 8 (black back rank), row 7 = rank 1 (white back rank)
    col 0 = file a, col 7 = file h

So ``Square(7, 0)`` is a1 and ``Square(0, 7)`` is h8.
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """A board coordinate, both components in 0–7."""

    row: int
    col: int

    def offset(self, other: Square) -> tuple[int, int]:
        """Absolute (Δrow, Δcol) between two squares."""
        return abs(self.row - other.row), abs(self.col - other.col)


def is_valid_square(row: int, col: int) -> bool:
    """Check whether a coordinate pair lies on the board."""
    return 0 <= row < 8 and 0 <= col < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. Square(6, 4) → 'e2'."""
    return chr(ord("a") + sq.col) + str(8 - sq.row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → Square(6, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(8) for col in range(8)
)
