"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from arbiter.core.enums import Color, PieceType
from arbiter.core.move import Move
from arbiter.core.piece import Piece
from arbiter.core.types import Square, col_of, make_square, row_of

_COLOR_COUNT = 2

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 64-square board with a cached king index.

    Index ``row * 8 + col``; row 0 is rank 8. Every transform returns a new
    board, so a board can be shared freely between position snapshots.
    """

    __slots__ = ("_squares", "_king_squares")

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        cells: tuple[Piece | None, ...] = (
            (None,) * 64 if squares is None else tuple(squares)
        )
        if len(cells) != 64:
            raise ValueError(f"Board needs exactly 64 squares, got {len(cells)}")
        self._squares = cells
        # [color] -> king square cache (None if king missing).
        kings: list[Square | None] = [None] * _COLOR_COUNT
        for sq, piece in enumerate(cells):
            if piece is not None and piece.piece_type == PieceType.KING:
                kings[int(piece.color)] = sq
        self._king_squares = tuple(kings)

    @classmethod
    def _from_parts(
        cls,
        squares: tuple[Piece | None, ...],
        king_squares: tuple[Square | None, ...],
    ) -> Board:
        b = cls.__new__(cls)
        b._squares = squares
        b._king_squares = king_squares
        return b

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    def __len__(self) -> int:
        return 64

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, p in enumerate(self._squares)
            if p is not None and p.color == color and p.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, in index order."""
        return [
            sq for sq, p in enumerate(self._squares) if p is not None and p.color == color
        ]

    def has_piece(self, color: Color, piece_type: PieceType) -> bool:
        """Whether *color* has at least one piece of *piece_type*."""
        return Piece(color, piece_type) in self._squares

    def king_square(self, color: Color) -> Square | None:
        """The king square for *color*, or None in a degenerate position."""
        return self._king_squares[int(color)]

    # -- Transforms ---------------------------------------------------------

    def make_move(self, move: Move) -> Board:
        """Return a new board with *move* played.

        Handles plain relocation, the en passant victim, the castling rook and
        promotion. No legality checks are done here.
        """
        piece = self._squares[move.from_sq]
        if piece is None:
            return self

        cells = list(self._squares)
        kings = list(self._king_squares)

        if move.is_en_passant and move.captured_sq is not None:
            cells[move.captured_sq] = None

        if move.is_castling:
            row = row_of(move.to_sq)
            if col_of(move.to_sq) == 6:
                rook_from, rook_to = make_square(row, 7), make_square(row, 5)
            else:
                rook_from, rook_to = make_square(row, 0), make_square(row, 3)
            cells[rook_to] = cells[rook_from]
            cells[rook_from] = None

        captured = cells[move.to_sq]
        if captured is not None and captured.piece_type == PieceType.KING:
            kings[int(captured.color)] = None

        if move.promotion is not None:
            cells[move.to_sq] = Piece(piece.color, move.promotion)
        else:
            cells[move.to_sq] = piece
        cells[move.from_sq] = None

        if piece.piece_type == PieceType.KING:
            kings[int(piece.color)] = move.to_sq

        return Board._from_parts(tuple(cells), tuple(kings))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        cells: list[Piece | None] = [None] * 64
        for col, pt in enumerate(_BACK_RANK):
            cells[make_square(0, col)] = Piece(Color.BLACK, pt)
            cells[make_square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            cells[make_square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            cells[make_square(7, col)] = Piece(Color.WHITE, pt)
        return cls(cells)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self[make_square(row, col)]
                cells.append(p.symbol if p else "·")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
