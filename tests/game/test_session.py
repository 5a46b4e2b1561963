"""Tests for GameSession — board + turn ownership and move commits."""

import logging

import pytest

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.move import Move
from chesslite.core.piece import Piece
from chesslite.core.types import Square, parse_square
from chesslite.game.session import GameSession

A1, D1, E1, H1 = (parse_square(n) for n in ("a1", "d1", "e1", "h1"))
E2, E4, E5, E7 = (parse_square(n) for n in ("e2", "e4", "e5", "e7"))
D5 = parse_square("d5")


def _session_with(
    *placed: tuple[Square, Piece], turn: Color = Color.WHITE
) -> GameSession:
    board = Board()
    for sq, piece in placed:
        board[sq] = piece
    return GameSession(board, turn)


class TestNewSession:
    def test_initial_state(self) -> None:
        session = GameSession()
        assert session.turn == Color.WHITE
        assert session.board == Board.initial()

    def test_custom_board_and_turn(self) -> None:
        board = Board()
        session = GameSession(board, Color.BLACK)
        assert session.board is board
        assert session.turn == Color.BLACK


class TestAttemptMove:
    def test_legal_move_commits_and_flips_turn(self) -> None:
        session = GameSession()
        assert session.attempt_move(E2, E4)
        assert session.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert session.board[E2] is None
        assert session.turn == Color.BLACK

    def test_rook_across_empty_back_rank(self) -> None:
        rook = Piece(Color.WHITE, PieceType.ROOK)
        session = _session_with((A1, rook))
        assert session.attempt_move(A1, H1)
        assert session.board[H1] == rook
        assert session.board[A1] is None
        assert session.turn == Color.BLACK

    def test_illegal_move_leaves_state_untouched(self) -> None:
        session = GameSession()
        before = session.board.copy()
        assert not session.attempt_move(E2, E5)
        assert session.board == before
        assert session.turn == Color.WHITE

    def test_self_capture_rejected(self) -> None:
        session = GameSession()
        assert not session.attempt_move(A1, D1)  # d1 holds the white queen
        assert session.board[D1] == Piece(Color.WHITE, PieceType.QUEEN)
        assert session.turn == Color.WHITE

    def test_king_zero_move_rejected(self) -> None:
        session = GameSession()
        assert not session.attempt_move(E1, E1)
        assert session.board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert session.turn == Color.WHITE

    def test_wrong_color_rejected(self) -> None:
        session = GameSession()
        assert not session.attempt_move(E7, E5)
        assert session.board[E7] == Piece(Color.BLACK, PieceType.PAWN)
        assert session.turn == Color.WHITE

    def test_empty_source_rejected(self) -> None:
        session = GameSession()
        assert not session.attempt_move(E4, E5)
        assert session.turn == Color.WHITE

    def test_capture_replaces_target(self) -> None:
        session = GameSession()
        assert session.attempt_move(E2, E4)
        assert session.attempt_move(parse_square("d7"), D5)
        assert session.attempt_move(E4, D5)
        assert session.board[D5] == Piece(Color.WHITE, PieceType.PAWN)
        assert len(session.board.pieces(Color.BLACK)) == 15
        assert session.turn == Color.BLACK

    def test_turns_alternate(self) -> None:
        session = GameSession()
        assert session.attempt_move(E2, E4)
        assert not session.attempt_move(parse_square("d2"), parse_square("d4"))
        assert session.attempt_move(E7, E5)
        assert session.turn == Color.WHITE

    def test_sliders_pass_over_pieces(self) -> None:
        session = GameSession()
        # a1 rook jumps its own pawn and takes the a7 pawn
        assert session.attempt_move(A1, parse_square("a7"))
        assert session.board[parse_square("a7")] == Piece(Color.WHITE, PieceType.ROOK)


class TestEvents:
    def test_move_event_fires(self) -> None:
        session = GameSession()
        events: list[tuple[str, Piece | None]] = []
        session.events.on_move.append(lambda m, cap: events.append((str(m), cap)))
        session.attempt_move(E2, E4)
        assert events == [("e2e4", None)]

    def test_move_event_reports_capture(self) -> None:
        session = GameSession()
        captured: list[Piece | None] = []
        session.events.on_move.append(lambda _m, cap: captured.append(cap))
        session.attempt_move(A1, parse_square("a7"))
        assert captured == [Piece(Color.BLACK, PieceType.PAWN)]

    def test_rejected_event_fires(self) -> None:
        session = GameSession()
        rejected: list[Move] = []
        moved: list[Move] = []
        session.events.on_rejected.append(rejected.append)
        session.events.on_move.append(lambda m, _cap: moved.append(m))
        session.attempt_move(E2, E5)
        assert rejected == [Move(E2, E5)]
        assert moved == []

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        session = GameSession()
        with caplog.at_level(logging.DEBUG, logger="chesslite.game.session"):
            session.attempt_move(E7, E5)
        assert "Rejected e7e5" in caplog.text


class TestTurnAndReset:
    def test_flip_turn(self) -> None:
        session = GameSession()
        session.flip_turn()
        assert session.turn == Color.BLACK
        session.flip_turn()
        assert session.turn == Color.WHITE

    def test_reset(self) -> None:
        session = GameSession()
        session.attempt_move(E2, E4)
        resets: list[bool] = []
        session.events.on_reset.append(lambda: resets.append(True))
        session.reset()
        assert session.board == Board.initial()
        assert session.turn == Color.WHITE
        assert resets == [True]


class TestLegalDestinations:
    def test_side_to_move_piece(self) -> None:
        session = GameSession()
        assert set(session.legal_destinations(E2)) == {parse_square("e3"), E4}

    def test_other_side_piece_has_none(self) -> None:
        session = GameSession()
        assert session.legal_destinations(E7) == []

    def test_empty_square_has_none(self) -> None:
        session = GameSession()
        assert session.legal_destinations(E4) == []
