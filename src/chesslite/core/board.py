"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Sequence

from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import ALL_SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(sq: Square) -> int:
    return sq.row * 8 + sq.col


class Board:
    """Mutable 64-square board.

    Holds occupancy only; whose turn it is belongs to the game session.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[_index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[_index(sq)] = piece

    def occupant_at(self, sq: Square) -> Piece | None:
        return self._squares[_index(sq)]

    def is_occupied(self, sq: Square) -> bool:
        return self._squares[_index(sq)] is not None

    def is_occupied_by_opponent(self, sq: Square, color: Color) -> bool:
        """Whether *sq* holds a piece of the side opposing *color*."""
        piece = self._squares[_index(sq)]
        return piece is not None and piece.color != color

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            sq
            for sq in ALL_SQUARES
            if (p := self._squares[_index(sq)]) is not None and p.color == color
        ]

    # -- Mutation / copying -------------------------------------------------

    def apply_move(self, source: Square, target: Square) -> Piece | None:
        """Move the occupant of *source* onto *target*.

        Whatever stood on *target* is overwritten and returned. No legality
        check is made here; callers validate first.
        """
        piece = self[source]
        captured = self[target]
        self[source] = None
        self[target] = piece
        return captured

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (black on rows 0–1, white on rows 6–7)."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_layout(cls, rows: Sequence[Sequence[str | None]]) -> Board:
        """Build a board from 8 rows of 8 tokens (``"white.rook"`` or None)."""
        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError("Board layout must be 8 rows of 8 cells")
        b = cls()
        for row_idx, row in enumerate(rows):
            for col_idx, token in enumerate(row):
                if token is not None:
                    b[Square(row_idx, col_idx)] = Piece.from_token(token)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self[Square(row, col)]
                cells.append(p.letter if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
