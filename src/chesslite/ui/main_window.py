"""MainWindow — top-level window hosting the board and turn indicator."""

from __future__ import annotations

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from chesslite.core.move import Move
from chesslite.core.piece import Piece
from chesslite.game.session import GameSession
from chesslite.ui.board.board_view import BoardView
from chesslite.ui.settings import AppSettings
from chesslite.ui.styles.theme import BoardTheme


class MainWindow(QMainWindow):
    """Main application window for Chesslite."""

    def __init__(
        self,
        session: GameSession | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chesslite")
        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._session = session if session is not None else GameSession()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_session_events()
        self._apply_settings()

        self._board_view.board_scene.set_session(self._session)
        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView()
        self.setCentralWidget(self._board_view)

        self._status_label = QLabel()
        status = QStatusBar()
        status.addWidget(self._status_label)
        self.setStatusBar(status)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        game_menu = menu_bar.addMenu("&Game")
        assert game_menu is not None

        self._new_game_action = QAction("&New Game", self)
        self._new_game_action.setShortcut(QKeySequence.StandardKey.New)
        self._new_game_action.triggered.connect(self._on_new_game)
        game_menu.addAction(self._new_game_action)

        game_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(quit_action)

    def _connect_session_events(self) -> None:
        self._session.events.on_move.append(self._on_move)
        self._session.events.on_reset.append(self._on_reset)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_destinations(s.show_destinations)

    # ── Session event handlers ───────────────────────────────────────────

    def _on_move(self, move: Move, captured: Piece | None) -> None:
        self._update_status(move, captured)

    def _on_reset(self) -> None:
        self._update_status()

    def _on_new_game(self) -> None:
        self._session.reset()

    # ── Status ───────────────────────────────────────────────────────────

    def _update_status(
        self, move: Move | None = None, captured: Piece | None = None
    ) -> None:
        text = f"{str(self._session.turn).capitalize()} to move"
        if move is not None:
            last = f"{move} takes {captured.symbol}" if captured else str(move)
            text = f"{last}  ·  {text}"
        self._status_label.setText(text)

    @property
    def status_text(self) -> str:
        return self._status_label.text()
