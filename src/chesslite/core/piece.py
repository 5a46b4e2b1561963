"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.enums import Color, PieceType

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

_COLORS_BY_NAME: dict[str, Color] = {str(c): c for c in Color}
_TYPES_BY_NAME: dict[str, PieceType] = {str(pt): pt for pt in PieceType}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Layout token, e.g. ``white.rook``."""
        return f"{self.color}.{self.piece_type}"

    @classmethod
    def from_token(cls, token: str) -> Piece:
        """Create piece from a layout token, e.g. 'black.knight'."""
        color_name, _, type_name = token.partition(".")
        try:
            return cls(_COLORS_BY_NAME[color_name], _TYPES_BY_NAME[type_name])
        except KeyError:
            raise ValueError(f"Invalid piece token: {token!r}") from None

    @property
    def letter(self) -> str:
        """Single letter (uppercase = white, lowercase = black)."""
        char = _LETTERS[self.piece_type]
        return char.upper() if self.color == Color.WHITE else char

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
