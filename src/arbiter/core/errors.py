"""Exception hierarchy for the rules engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arbiter.core.enums import EndReason, GameResult
    from arbiter.core.move import Move


class ArbiterError(Exception):
    """Base class for errors raised by the rules engine."""


class IllegalMoveError(ArbiterError, ValueError):
    """Raised when a move is not in the position's legal-move set."""

    def __init__(self, move: Move, reason: str = "not a legal move") -> None:
        super().__init__(f"Illegal move {move}: {reason}")
        self.move = move


class GameOverError(ArbiterError):
    """Raised when acting on a position whose game has already ended."""

    def __init__(self, result: GameResult, end_reason: EndReason | None) -> None:
        reason = end_reason.value if end_reason is not None else "unknown"
        super().__init__(f"Game is over ({result.value}, {reason})")
        self.result = result
        self.end_reason = end_reason


class FenError(ArbiterError, ValueError):
    """Raised for malformed FEN input."""
