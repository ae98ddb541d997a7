"""Position: immutable game snapshot and the state-transition functions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from arbiter.core.attacks import is_in_check
from arbiter.core.board import Board
from arbiter.core.enums import Color, EndReason, GameResult, PieceType
from arbiter.core.errors import GameOverError, IllegalMoveError
from arbiter.core.keys import generate_position_key
from arbiter.core.move import Move, promotion_from_char
from arbiter.core.move_generator import generate_all_legal_moves
from arbiter.core.options import DEFAULT_OPTIONS, RulesOptions
from arbiter.core.rights import CastlingRights
from arbiter.core.rules import Rules
from arbiter.core.types import Square, col_of, make_square, parse_square, row_of

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Position:
    """Full game snapshot: board, mover, rights, clocks, history and status.

    Never mutated. ``legal_moves``, ``in_check``, ``result`` and
    ``end_reason`` are derived once when the snapshot is built; use
    :func:`initial`, :meth:`setup` or :func:`apply_move` rather than the
    constructor.
    """

    board: Board
    side_to_move: Color
    castling: CastlingRights
    en_passant: Square | None
    halfmove_clock: int
    fullmove_number: int
    position_history: tuple[str, ...]
    legal_moves: tuple[Move, ...]
    in_check: bool
    result: GameResult = GameResult.ONGOING
    end_reason: EndReason | None = None
    last_move: Move | None = None

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, White to move."""
        return cls.setup(Board.initial())

    @classmethod
    def setup(
        cls,
        board: Board,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights | None = None,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        history: Iterable[str] = (),
        options: RulesOptions = DEFAULT_OPTIONS,
    ) -> Position:
        """Build a snapshot from arbitrary parts with every derived field computed.

        The position's own key is appended to *history*.
        """
        if halfmove_clock < 0:
            raise ValueError(f"Invalid halfmove clock: {halfmove_clock!r}")
        if fullmove_number < 1:
            raise ValueError(f"Invalid fullmove number: {fullmove_number!r}")
        if en_passant is not None and not 0 <= en_passant < 64:
            raise ValueError(f"Invalid en passant square: {en_passant!r}")
        return _build(
            board,
            side_to_move,
            castling if castling is not None else CastlingRights(),
            en_passant,
            halfmove_clock,
            fullmove_number,
            tuple(history),
            None,
            options,
        )

    # ── Derived views ────────────────────────────────────────────────────

    @property
    def key(self) -> str:
        """Position key of this snapshot (last entry of the history)."""
        return self.position_history[-1]

    @property
    def is_game_over(self) -> bool:
        return self.result is not GameResult.ONGOING

    @property
    def ply_count(self) -> int:
        """Half-moves recorded in this snapshot's history."""
        return len(self.position_history) - 1

    def repetition_count(self) -> int:
        """How many times the current key occurred in game history."""
        return Rules.repetition_count(self.position_history, self.key)

    def moves_from(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq*."""
        return [m for m in self.legal_moves if m.from_sq == sq]

    def find_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> Move | None:
        """The legal move matching the squares (and promotion), if any."""
        for move in self.legal_moves:
            if (
                move.from_sq == from_sq
                and move.to_sq == to_sq
                and move.promotion == promotion
            ):
                return move
        return None

    def __repr__(self) -> str:
        status = self.result.value
        if self.end_reason is not None:
            status += f" ({self.end_reason.value})"
        return (
            f"Position(side_to_move={self.side_to_move}, "
            f"fullmove={self.fullmove_number}, "
            f"legal_moves={len(self.legal_moves)}, status={status})"
        )


def initial() -> Position:
    """Standard starting position, White to move."""
    return Position.initial()


# ── State transition ─────────────────────────────────────────────────────────


def apply_move(
    position: Position,
    move: Move,
    options: RulesOptions = DEFAULT_OPTIONS,
) -> Position:
    """Play *move* and return the next snapshot; *position* is left untouched.

    With validation on (the default) the move must match an entry of
    ``position.legal_moves`` by squares and promotion, and that canonical
    entry is what gets played. :class:`IllegalMoveError` is raised otherwise,
    and :class:`GameOverError` if the game has already ended.
    """
    if options.validate_moves:
        if position.is_game_over:
            raise GameOverError(position.result, position.end_reason)
        legal = position.find_move(move.from_sq, move.to_sq, move.promotion)
        if legal is None:
            _LOGGER.warning("Rejected move %s in %r", move, position)
            raise IllegalMoveError(move)
        move = legal

    old_board = position.board
    mover = old_board[move.from_sq]
    board = old_board.make_move(move)
    castling = position.castling.after_move(move)

    is_pawn_move = mover is not None and mover.piece_type == PieceType.PAWN
    en_passant: Square | None = None
    if is_pawn_move and abs(row_of(move.to_sq) - row_of(move.from_sq)) == 2:
        en_passant = make_square(
            (row_of(move.from_sq) + row_of(move.to_sq)) // 2, col_of(move.from_sq)
        )

    is_capture = old_board[move.to_sq] is not None or move.is_en_passant
    halfmove_clock = 0 if (is_capture or is_pawn_move) else position.halfmove_clock + 1
    fullmove_number = position.fullmove_number + (
        1 if position.side_to_move == Color.BLACK else 0
    )

    nxt = _build(
        board,
        position.side_to_move.opposite,
        castling,
        en_passant,
        halfmove_clock,
        fullmove_number,
        position.position_history,
        move,
        options,
    )
    _LOGGER.debug("Applied %s -> %r", move, nxt)
    if nxt.is_game_over and options.validate_moves:
        _LOGGER.info(
            "Game over: %s by %s", nxt.result.value, nxt.end_reason.value
        )
    return nxt


def _build(
    board: Board,
    side_to_move: Color,
    castling: CastlingRights,
    en_passant: Square | None,
    halfmove_clock: int,
    fullmove_number: int,
    previous_history: tuple[str, ...],
    last_move: Move | None,
    options: RulesOptions,
) -> Position:
    key = generate_position_key(board, side_to_move, castling, en_passant)
    history = previous_history + (key,)
    in_check = is_in_check(board, side_to_move)
    legal_moves = tuple(
        generate_all_legal_moves(board, side_to_move, castling, en_passant)
    )
    result, end_reason = Rules.classify(
        board,
        side_to_move,
        in_check,
        legal_moves,
        halfmove_clock,
        history,
        fifty_move_threshold=options.fifty_move_threshold,
        repetition_threshold=options.repetition_threshold,
    )
    return Position(
        board=board,
        side_to_move=side_to_move,
        castling=castling,
        en_passant=en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
        position_history=history,
        legal_moves=legal_moves,
        in_check=in_check,
        result=result,
        end_reason=end_reason,
        last_move=last_move,
    )


# ── Endings decided off the board ────────────────────────────────────────────


def _finish(position: Position, result: GameResult, reason: EndReason) -> Position:
    if position.is_game_over:
        raise GameOverError(position.result, position.end_reason)
    _LOGGER.info("Game over: %s by %s", result.value, reason.value)
    return replace(position, result=result, end_reason=reason)


def resign(position: Position, color: Color) -> Position:
    """*color* resigns; the opponent wins."""
    return _finish(position, GameResult.win_for(color.opposite), EndReason.RESIGNATION)


def agree_draw(position: Position) -> Position:
    """Both players agree to a draw."""
    return _finish(position, GameResult.DRAW, EndReason.AGREEMENT)


def lose_on_time(position: Position, color: Color) -> Position:
    """*color* ran out of time, as reported by the host's clock."""
    return _finish(position, GameResult.win_for(color.opposite), EndReason.TIME_OUT)


# ── Move text ────────────────────────────────────────────────────────────────


def parse_move(position: Position, text: str) -> Move:
    """Resolve long-algebraic text such as ``e2e4`` or ``e7e8q`` to a legal move."""
    text = text.strip()
    if len(text) not in (4, 5):
        raise ValueError(f"Invalid move text: {text!r}")
    from_sq = parse_square(text[:2])
    to_sq = parse_square(text[2:4])
    promotion = promotion_from_char(text[4]) if len(text) == 5 else None
    move = position.find_move(from_sq, to_sq, promotion)
    if move is None:
        raise IllegalMoveError(Move(from_sq, to_sq, promotion))
    return move
