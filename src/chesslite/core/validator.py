"""Move validation: per-kind geometric rules and capture consistency.

Rules look only at the source/target coordinates, except the pawn rule,
which also needs target occupancy. Intermediate squares are never
inspected, so sliding pieces may pass over others and the double pawn
push ignores the square it skips.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.types import ALL_SQUARES, Square

MoveRule: TypeAlias = Callable[[Square, Square, Color, Board], bool]


# -- Geometric rules --------------------------------------------------------


def rook_rule(source: Square, target: Square) -> bool:
    return source.row == target.row or source.col == target.col


def bishop_rule(source: Square, target: Square) -> bool:
    d_row, d_col = source.offset(target)
    return d_row == d_col


def queen_rule(source: Square, target: Square) -> bool:
    return rook_rule(source, target) or bishop_rule(source, target)


def knight_rule(source: Square, target: Square) -> bool:
    return source.offset(target) in ((2, 1), (1, 2))


def king_rule(source: Square, target: Square) -> bool:
    """One step in any direction; a zero-length move also passes."""
    d_row, d_col = source.offset(target)
    return d_row <= 1 and d_col <= 1


def pawn_rule(source: Square, target: Square, color: Color, board: Board) -> bool:
    direction = color.pawn_direction

    if target.col == source.col:
        # Single push
        if target.row == source.row + direction:
            return not board.is_occupied(target)
        # Double push from the start row
        if (
            source.row == color.pawn_start_row
            and target.row == source.row + 2 * direction
        ):
            return not board.is_occupied(target)
        return False

    # Diagonal capture
    return (
        abs(target.col - source.col) == 1
        and target.row == source.row + direction
        and board.is_occupied_by_opponent(target, color)
    )


def _geometric(rule: Callable[[Square, Square], bool]) -> MoveRule:
    def _rule(source: Square, target: Square, _color: Color, _board: Board) -> bool:
        return rule(source, target)

    return _rule


RULES: dict[PieceType, MoveRule] = {
    PieceType.ROOK: _geometric(rook_rule),
    PieceType.BISHOP: _geometric(bishop_rule),
    PieceType.QUEEN: _geometric(queen_rule),
    PieceType.KNIGHT: _geometric(knight_rule),
    PieceType.KING: _geometric(king_rule),
    PieceType.PAWN: pawn_rule,
}


# -- Validation entry points ------------------------------------------------


def validate_move(
    piece_type: PieceType,
    color: Color,
    source: Square,
    target: Square,
    board: Board,
) -> bool:
    """Whether the move has a legal shape for *piece_type*."""
    rule = RULES.get(piece_type)
    if rule is None:
        return False
    return rule(source, target, color, board)


def is_valid_capture(board: Board, target: Square, color: Color) -> bool:
    """Target must be empty or hold a piece of the opposing side."""
    piece = board[target]
    return piece is None or piece.color != color


def attempt_move(
    piece_type: PieceType,
    color: Color,
    source: Square,
    target: Square,
    board: Board,
) -> bool:
    """Full acceptance check for a candidate move.

    Does not check whose turn it is; that is the caller's precondition.
    """
    return validate_move(piece_type, color, source, target, board) and (
        is_valid_capture(board, target, color)
    )


def legal_destinations(board: Board, source: Square) -> list[Square]:
    """Every square the piece on *source* may move to."""
    piece = board[source]
    if piece is None:
        return []
    return [
        target
        for target in ALL_SQUARES
        if attempt_move(piece.piece_type, piece.color, source, target, board)
    ]
