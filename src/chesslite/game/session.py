"""GameSession — owns the board and the turn, commits validated moves.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.move import Move
from chesslite.core.piece import Piece
from chesslite.core.types import Square
from chesslite.core.validator import attempt_move, legal_destinations

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "Piece | None"], None]  # move, captured
RejectedCallback = Callable[[Move], None]
ResetCallback = Callable[[], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """A single two-player game: board, side to move, and move commits.

    Thread-safety: none. Share a session between threads only behind one
    lock that covers both the board and the turn.
    """

    __slots__ = ("_board", "_turn", "events")

    def __init__(self, board: Board | None = None, turn: Color = Color.WHITE) -> None:
        self._board = board if board is not None else Board.initial()
        self._turn = turn
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> Color:
        return self._turn

    # ── Commands ─────────────────────────────────────────────────────────

    def attempt_move(self, source: Square, target: Square) -> bool:
        """Try to move the piece on *source* to *target*.

        Returns True if the move was legal and has been applied. Rejected
        moves leave the board and the turn untouched.
        """
        move = Move(source, target)
        piece = self._board[source]

        if piece is None or piece.color != self._turn:
            _LOGGER.debug("Rejected %s: no %s piece on source", move, self._turn)
            self._emit_rejected(move)
            return False

        if not attempt_move(piece.piece_type, piece.color, source, target, self._board):
            _LOGGER.debug("Rejected %s: illegal for %s", move, piece)
            self._emit_rejected(move)
            return False

        captured = self._board.apply_move(source, target)
        self.flip_turn()
        _LOGGER.debug("Played %s (%s), captured=%s", move, piece, captured)

        for cb in self.events.on_move:
            cb(move, captured)
        return True

    def flip_turn(self) -> None:
        self._turn = self._turn.opposite

    def reset(self) -> None:
        """Start over from the initial layout with white to move."""
        self._board = Board.initial()
        self._turn = Color.WHITE
        _LOGGER.debug("Session reset")
        for cb in self.events.on_reset:
            cb()

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_destinations(self, source: Square) -> list[Square]:
        """Destinations for *source* when it holds a piece of the side to move."""
        piece = self._board[source]
        if piece is None or piece.color != self._turn:
            return []
        return legal_destinations(self._board, source)

    # ── Internal ─────────────────────────────────────────────────────────

    def _emit_rejected(self, move: Move) -> None:
        for cb in self.events.on_rejected:
            cb(move)
