"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chesslite.core import Board, Color, PieceType, attempt_move, parse_square

    board = Board.initial()
    ok = attempt_move(
        PieceType.PAWN, Color.WHITE, parse_square("e2"), parse_square("e4"), board
    )
"""

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.move import Move
from chesslite.core.piece import Piece
from chesslite.core.types import (
    ALL_SQUARES,
    Square,
    is_valid_square,
    parse_square,
    square_name,
)
from chesslite.core.validator import (
    attempt_move,
    is_valid_capture,
    legal_destinations,
    validate_move,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    # Validation
    "attempt_move",
    "is_valid_capture",
    "legal_destinations",
    "validate_move",
]
