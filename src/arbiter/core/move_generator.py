"""Legal and pseudo-legal move generation."""

from __future__ import annotations

from arbiter.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_DIRECTION,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_in_check,
    is_square_attacked,
)
from arbiter.core.board import Board
from arbiter.core.enums import Color, PieceType
from arbiter.core.move import PROMOTION_TYPES, Move
from arbiter.core.rights import CastlingRights
from arbiter.core.types import Square, make_square

_START_ROW: tuple[int, int] = (6, 1)
_PROMOTION_ROW: tuple[int, int] = (0, 7)
_HOME_ROW: tuple[int, int] = (7, 0)


class MoveGenerator:
    """Generates moves for one side of a board under given castling/en passant rights.

    Pure with respect to its inputs: candidate moves are tried on scratch
    copies produced by :meth:`Board.make_move`.
    """

    __slots__ = ("_board", "_color", "_castling", "_en_passant")

    def __init__(
        self,
        board: Board,
        side_to_move: Color,
        castling: CastlingRights | None = None,
        en_passant: Square | None = None,
    ) -> None:
        self._board = board
        self._color = side_to_move
        self._castling = castling if castling is not None else CastlingRights()
        self._en_passant = en_passant

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move, in board order."""
        board = self._board
        color = self._color
        return [
            move
            for move in self.generate_pseudo_legal_moves()
            if not is_in_check(board.make_move(move), color)
        ]

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        for sq in self._board.all_pieces(self._color):
            self._gen_piece(sq, moves)
        return moves

    def moves_from(self, sq: Square) -> list[Move]:
        """Pseudo-legal moves of the piece on *sq* (empty if not ours)."""
        piece = self._board[sq]
        if piece is None or piece.color != self._color:
            return []
        moves: list[Move] = []
        self._gen_piece(sq, moves)
        return moves

    def is_legal(self, move: Move) -> bool:
        """Does *move* keep the mover's king out of check?"""
        return not is_in_check(self._board.make_move(move), self._color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_piece(self, sq: Square, moves: list[Move]) -> None:
        piece = self._board[sq]
        assert piece is not None
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, KNIGHT_TARGETS[sq], moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(sq, BISHOP_RAYS[sq], moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(sq, ROOK_RAYS[sq], moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(sq, QUEEN_RAYS[sq], moves)
        else:
            self._gen_steps(sq, KING_TARGETS[sq], moves)
            self._gen_castling(sq, moves)

    def _gen_pawn(self, sq: Square, moves: list[Move]) -> None:
        board = self._board
        color = self._color
        color_idx = int(color)
        direction = PAWN_DIRECTION[color_idx]
        row = sq >> 3
        col = sq & 7
        ahead_row = row + direction
        if not 0 <= ahead_row < 8:
            return
        promotes = ahead_row == _PROMOTION_ROW[color_idx]

        one_step = make_square(ahead_row, col)
        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, promotes, moves)
            if row == _START_ROW[color_idx]:
                two_step = make_square(row + 2 * direction, col)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for cap_col in (col - 1, col + 1):
            if not 0 <= cap_col < 8:
                continue
            cap_sq = make_square(ahead_row, cap_col)
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    self._add_pawn_move(sq, cap_sq, promotes, moves)
            elif cap_sq == self._en_passant and self._is_enemy_pawn(
                make_square(row, cap_col)
            ):
                moves.append(
                    Move(
                        sq,
                        cap_sq,
                        is_en_passant=True,
                        captured_sq=make_square(row, cap_col),
                    )
                )

    @staticmethod
    def _add_pawn_move(
        sq: Square, to_sq: Square, promotes: bool, moves: list[Move]
    ) -> None:
        if promotes:
            for pt in PROMOTION_TYPES:
                moves.append(Move(sq, to_sq, promotion=pt))
        else:
            moves.append(Move(sq, to_sq))

    def _gen_steps(
        self, sq: Square, targets: tuple[Square, ...], moves: list[Move]
    ) -> None:
        board = self._board
        color = self._color
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        color = self._color
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, moves: list[Move]) -> None:
        color = self._color
        home_row = _HOME_ROW[int(color)]
        if king_sq != make_square(home_row, 4):
            return
        castling = self._castling
        can_kingside = castling.can_castle_kingside(color)
        can_queenside = castling.can_castle_queenside(color)
        if not (can_kingside or can_queenside):
            return

        board = self._board
        opponent = color.opposite
        if is_square_attacked(board, king_sq, opponent):
            return

        if can_kingside and self._has_home_rook(make_square(home_row, 7)):
            f_sq = make_square(home_row, 5)
            g_sq = make_square(home_row, 6)
            if (
                board.is_empty(f_sq)
                and board.is_empty(g_sq)
                and not is_square_attacked(board, f_sq, opponent)
                and not is_square_attacked(board, g_sq, opponent)
            ):
                moves.append(Move(king_sq, g_sq, is_castling=True))

        if can_queenside and self._has_home_rook(make_square(home_row, 0)):
            b_sq = make_square(home_row, 1)
            c_sq = make_square(home_row, 2)
            d_sq = make_square(home_row, 3)
            if (
                board.is_empty(b_sq)
                and board.is_empty(c_sq)
                and board.is_empty(d_sq)
                and not is_square_attacked(board, d_sq, opponent)
                and not is_square_attacked(board, c_sq, opponent)
            ):
                moves.append(Move(king_sq, c_sq, is_castling=True))

    def _is_enemy_pawn(self, sq: Square) -> bool:
        pawn = self._board[sq]
        return (
            pawn is not None
            and pawn.color != self._color
            and pawn.piece_type == PieceType.PAWN
        )

    def _has_home_rook(self, sq: Square) -> bool:
        rook = self._board[sq]
        return (
            rook is not None
            and rook.color == self._color
            and rook.piece_type == PieceType.ROOK
        )


def generate_all_legal_moves(
    board: Board,
    side_to_move: Color,
    castling: CastlingRights | None = None,
    en_passant: Square | None = None,
) -> list[Move]:
    """Legal moves for *side_to_move* on *board* under the given rights."""
    return MoveGenerator(board, side_to_move, castling, en_passant).generate_legal_moves()
