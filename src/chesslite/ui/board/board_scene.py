"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
)

from chesslite.core.move import Move
from chesslite.core.piece import Piece
from chesslite.core.types import ALL_SQUARES, Square, is_valid_square
from chesslite.ui.board.piece_item import PieceItem
from chesslite.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chesslite.game.session import GameSession


class BoardScene(QGraphicsScene):
    """Renders the board and piece items, turns drags into move attempts.

    Signals:
        move_made(Move): Emitted after a dropped move was accepted.
        move_rejected(Move): Emitted when a drop was refused by the session.
    """

    move_made = pyqtSignal(Move)
    move_rejected = pyqtSignal(Move)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._session: GameSession | None = None

        # Interaction state
        self._dragging_item: PieceItem | None = None
        self._show_destinations = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._destination_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_session(self, session: GameSession) -> None:
        """Attach the game session whose board is displayed.

        The scene redraws itself whenever the session commits a move or resets.
        """
        if self._session is not None:
            self._session.events.on_move.remove(self._on_session_move)
            self._session.events.on_reset.remove(self.refresh)
        self._session = session
        session.events.on_move.append(self._on_session_move)
        session.events.on_reset.append(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        """Full redraw of pieces from the session board."""
        self._clear_selection()
        self._sync_pieces()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_destinations(self, visible: bool) -> None:
        """Show or hide reachable-square highlights."""
        self._show_destinations = visible
        if not visible:
            self._clear_items(self._destination_items)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self.TILE
        for sq in ALL_SQUARES:
            is_light = (sq.row + sq.col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(sq.col * t, sq.row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._session is None:
            return

        t = self.TILE
        board = self._session.board
        for sq in ALL_SQUARES:
            piece = board[sq]
            if piece is None:
                continue
            item = PieceItem.for_theme(
                piece, sq, t, self._theme.white_piece, self._theme.black_piece
            )
            self.addItem(item)
            item.place_at(sq.col * t, sq.row * t)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._session is None or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
            return super().mousePressEvent(event)

        piece = self._session.board[sq]

        # Only the side to move may pick up a piece
        if piece is not None and piece.color == self._session.turn:
            self._select_square(sq)
            item = self._piece_items.get(sq)
            if item is not None:
                item.enable_drag(True)
                item.start_drag()
                self._dragging_item = item
        else:
            self._clear_selection()

        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        item = self._dragging_item
        if item is not None and item.is_dragging and event is not None:
            self._dragging_item = None
            drop_sq = self._pos_to_square(event.scenePos())
            if self._try_drop(item, drop_sq):
                return

        super().mouseReleaseEvent(event)

    # ── Move resolution ──────────────────────────────────────────────────

    def _try_drop(self, item: PieceItem, drop_sq: Square | None) -> bool:
        """Submit a drop to the session. Returns True if the move was played.

        Drops outside the board or back onto the origin are ignored.
        """
        if self._session is None or drop_sq is None or drop_sq == item.square:
            item.cancel_drag()
            item.enable_drag(False)
            return False

        move = Move(item.square, drop_sq)
        if self._session.attempt_move(move.source, move.target):
            # The piece items were already rebuilt by the session move event.
            self.move_made.emit(move)
            return True

        item.cancel_drag()
        item.enable_drag(False)
        self.move_rejected.emit(move)
        return False

    def _on_session_move(self, _move: Move, _captured: Piece | None) -> None:
        self.refresh()

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> None:
        self._clear_selection()

        rect = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if self._session is not None and self._show_destinations:
            for target in self._session.legal_destinations(sq):
                dot = self._make_highlight(target, self._theme.highlight_to)
                self._destination_items.append(dot)

    def _clear_selection(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._destination_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not is_valid_square(row, col):
            return None
        return Square(row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(sq.col * t, sq.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
