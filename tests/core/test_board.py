"""Tests for Board and square helpers."""

import pytest

from arbiter.core.board import Board
from arbiter.core.enums import Color, PieceType
from arbiter.core.move import Move
from arbiter.core.piece import Piece
from arbiter.core.types import (
    A1,
    A8,
    B1,
    C1,
    D1,
    D5,
    D6,
    E1,
    E2,
    E4,
    E5,
    E7,
    E8,
    F1,
    G1,
    H1,
    H8,
    make_square,
    parse_square,
    square_name,
)


class TestSquareHelpers:
    def test_layout_rank_eight_first(self) -> None:
        assert A8 == 0
        assert H8 == 7
        assert A1 == 56
        assert H1 == 63

    def test_e2_and_e4_indices(self) -> None:
        assert E2 == 52 == make_square(6, 4)
        assert E4 == 36 == make_square(4, 4)

    def test_parse_and_name_roundtrip(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    @pytest.mark.parametrize("name", ["", "e9", "i1", "e", "e44"])
    def test_parse_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_pawn_rows(self) -> None:
        board = Board.initial()
        assert board.pieces(Color.BLACK, PieceType.PAWN) == list(range(8, 16))
        assert board.pieces(Color.WHITE, PieceType.PAWN) == list(range(48, 56))

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is None

    def test_length_is_fixed(self) -> None:
        assert len(Board.initial()) == 64
        assert len(list(Board())) == 64

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board([None] * 63)


class TestBoardQueries:
    def test_king_square_cached(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_missing_king_is_none(self) -> None:
        assert Board().king_square(Color.WHITE) is None

    def test_has_piece(self) -> None:
        board = Board.initial()
        assert board.has_piece(Color.WHITE, PieceType.QUEEN)
        assert not Board().has_piece(Color.WHITE, PieceType.QUEEN)

    def test_all_pieces_counts(self) -> None:
        board = Board.initial()
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16


class TestBoardMakeMove:
    def test_source_board_untouched(self) -> None:
        board = Board.initial()
        after = board.make_move(Move(E2, E4))
        assert board[E2] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[E4] is None
        assert after[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert after[E2] is None

    def test_king_cache_follows_king(self) -> None:
        cells = [None] * 64
        cells[E1] = Piece(Color.WHITE, PieceType.KING)
        board = Board(cells).make_move(Move(E1, E2))
        assert board.king_square(Color.WHITE) == E2

    def test_en_passant_removes_victim(self) -> None:
        cells = [None] * 64
        cells[E5] = Piece(Color.WHITE, PieceType.PAWN)
        cells[D5] = Piece(Color.BLACK, PieceType.PAWN)
        board = Board(cells).make_move(
            Move(E5, D6, is_en_passant=True, captured_sq=D5)
        )
        assert board[D6] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[D5] is None
        assert board[E5] is None

    def test_castling_moves_rook(self) -> None:
        cells = [None] * 64
        cells[E1] = Piece(Color.WHITE, PieceType.KING)
        cells[H1] = Piece(Color.WHITE, PieceType.ROOK)
        cells[A1] = Piece(Color.WHITE, PieceType.ROOK)
        kingside = Board(cells).make_move(Move(E1, G1, is_castling=True))
        assert kingside[G1] == Piece(Color.WHITE, PieceType.KING)
        assert kingside[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert kingside[H1] is None
        queenside = Board(cells).make_move(Move(E1, C1, is_castling=True))
        assert queenside[C1] == Piece(Color.WHITE, PieceType.KING)
        assert queenside[D1] == Piece(Color.WHITE, PieceType.ROOK)
        assert queenside[A1] is None

    def test_promotion_substitutes_piece(self) -> None:
        cells = [None] * 64
        cells[E7] = Piece(Color.WHITE, PieceType.PAWN)
        board = Board(cells).make_move(Move(E7, E8, promotion=PieceType.KNIGHT))
        assert board[E8] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_empty_source_is_noop(self) -> None:
        board = Board.initial()
        assert board.make_move(Move(parse_square("e4"), parse_square("e5"))) is board


class TestBoardRepr:
    def test_rank_eight_on_top(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0].startswith("8 ♜")
        assert lines[7].startswith("1 ♖")
        assert lines[-1] == "  a b c d e f g h"

    def test_equality_and_hash(self) -> None:
        assert Board.initial() == Board.initial()
        assert hash(Board.initial()) == hash(Board.initial())
