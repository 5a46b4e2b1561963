"""Game management layer — session owning board and turn.

Quick start::

    from chesslite.core import parse_square
    from chesslite.game import GameSession

    session = GameSession()
    session.attempt_move(parse_square("e2"), parse_square("e4"))
"""

from chesslite.game.session import GameSession, SessionEvents

__all__ = [
    "GameSession",
    "SessionEvents",
]
