"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from collections.abc import Sequence

from arbiter.core import attacks
from arbiter.core.board import Board
from arbiter.core.enums import Color, EndReason, GameResult, PieceType
from arbiter.core.move import Move
from arbiter.core.move_generator import generate_all_legal_moves
from arbiter.core.rights import CastlingRights
from arbiter.core.types import Square, is_light_square

_MINOR_PIECES = (PieceType.KNIGHT, PieceType.BISHOP)


class Rules:
    """Static rule-checker over a board and its rights.

    Known limitation: insufficient material covers only K v K, K+minor v K and
    K+B v K+B on same-coloured squares. Other dead positions such as K+N+N v K
    are played on.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return attacks.is_in_check(board, color)

    @staticmethod
    def is_checkmate(
        board: Board,
        side_to_move: Color,
        castling: CastlingRights | None = None,
        en_passant: Square | None = None,
    ) -> bool:
        if not attacks.is_in_check(board, side_to_move):
            return False
        return not generate_all_legal_moves(board, side_to_move, castling, en_passant)

    @staticmethod
    def is_stalemate(
        board: Board,
        side_to_move: Color,
        castling: CastlingRights | None = None,
        en_passant: Square | None = None,
    ) -> bool:
        if attacks.is_in_check(board, side_to_move):
            return False
        return not generate_all_legal_moves(board, side_to_move, castling, en_passant)

    @staticmethod
    def has_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-colour bishops)."""
        white: list[tuple[Square, PieceType]] = []
        black: list[tuple[Square, PieceType]] = []
        for sq, piece in enumerate(board):
            if piece is None:
                continue
            side = white if piece.color == Color.WHITE else black
            side.append((sq, piece.piece_type))

        # K vs K
        if len(white) == 1 and len(black) == 1:
            return True

        # K+minor vs K
        for lone, other in ((white, black), (black, white)):
            if len(lone) == 1 and len(other) == 2:
                if any(pt in _MINOR_PIECES for _, pt in other):
                    return True

        # K+B vs K+B with same-colour bishops
        if len(white) == 2 and len(black) == 2:
            w_bishops = [sq for sq, pt in white if pt == PieceType.BISHOP]
            b_bishops = [sq for sq, pt in black if pt == PieceType.BISHOP]
            if w_bishops and b_bishops:
                return is_light_square(w_bishops[0]) == is_light_square(b_bishops[0])

        return False

    @staticmethod
    def is_fifty_move_rule(halfmove_clock: int, threshold: int = 100) -> bool:
        return halfmove_clock >= threshold  # 100 half-moves = 50 full moves

    @staticmethod
    def repetition_count(history: Sequence[str], key: str) -> int:
        """How many times *key* occurs in *history*."""
        return sum(1 for seen in history if seen == key)

    @staticmethod
    def is_threefold_repetition(
        history: Sequence[str], key: str, threshold: int = 3
    ) -> bool:
        return Rules.repetition_count(history, key) >= threshold

    @staticmethod
    def classify(
        board: Board,
        side_to_move: Color,
        in_check: bool,
        legal_moves: Sequence[Move],
        halfmove_clock: int,
        history: Sequence[str],
        *,
        fifty_move_threshold: int = 100,
        repetition_threshold: int = 3,
    ) -> tuple[GameResult, EndReason | None]:
        """Terminal status of a position; the first matching rule wins.

        *history* must already contain the position's own key as its last entry.
        """
        if not legal_moves:
            if in_check:
                return GameResult.win_for(side_to_move.opposite), EndReason.CHECKMATE
            return GameResult.DRAW, EndReason.STALEMATE

        if Rules.has_insufficient_material(board):
            return GameResult.DRAW, EndReason.INSUFFICIENT_MATERIAL

        if Rules.is_fifty_move_rule(halfmove_clock, fifty_move_threshold):
            return GameResult.DRAW, EndReason.FIFTY_MOVE_RULE

        if history and Rules.is_threefold_repetition(
            history, history[-1], repetition_threshold
        ):
            return GameResult.DRAW, EndReason.THREEFOLD_REPETITION

        return GameResult.ONGOING, None


# Module-level query aliases.
is_checkmate = Rules.is_checkmate
is_stalemate = Rules.is_stalemate
has_insufficient_material = Rules.has_insufficient_material
