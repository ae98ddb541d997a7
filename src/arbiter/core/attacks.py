"""Attack detection and the precomputed geometry shared with move generation."""

from __future__ import annotations

from arbiter.core.board import Board
from arbiter.core.enums import Color, PieceType
from arbiter.core.types import Square, make_square

# (d_row, d_col) pairs.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# White pawns advance towards row 0, black pawns towards row 7.
PAWN_DIRECTION: tuple[int, int] = (-1, 1)

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        row_idx = sq >> 3
        col_idx = sq & 7
        moves: list[Square] = []
        for dr, dc in offsets:
            ar = row_idx + dr
            ac = col_idx + dc
            if 0 <= ar < 8 and 0 <= ac < 8:
                moves.append(make_square(ar, ac))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        row_idx = sq >> 3
        col_idx = sq & 7
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ar = row_idx + dr
            ac = col_idx + dc
            ray: list[Square] = []
            while 0 <= ar < 8 and 0 <= ac < 8:
                ray.append(make_square(ar, ac))
                ar += dr
                ac += dc
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_sources() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    """[color][sq] -> squares a pawn of *color* would attack *sq* from."""
    sources: list[tuple[tuple[Square, ...], ...]] = []
    for color in (Color.WHITE, Color.BLACK):
        behind = -PAWN_DIRECTION[int(color)]
        per_square: list[tuple[Square, ...]] = []
        for sq in range(64):
            row_idx = sq >> 3
            col_idx = sq & 7
            ar = row_idx + behind
            found: list[Square] = []
            if 0 <= ar < 8:
                for ac in (col_idx - 1, col_idx + 1):
                    if 0 <= ac < 8:
                        found.append(make_square(ar, ac))
            per_square.append(tuple(found))
        sources.append(tuple(per_square))
    return tuple(sources)


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)
_PAWN_SOURCES = _build_pawn_sources()


# -- Queries ----------------------------------------------------------------


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    for from_sq in _PAWN_SOURCES[int(by_color)][sq]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.PAWN
        ):
            return True

    for from_sq in KNIGHT_TARGETS[sq]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    for from_sq in KING_TARGETS[sq]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KING
        ):
            return True

    for ray in ROOK_RAYS[sq]:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in _ORTHOGONAL_ATTACKERS:
                return True
            break

    for ray in BISHOP_RAYS[sq]:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in _DIAGONAL_ATTACKERS:
                return True
            break

    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked? A missing king is never in check."""
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite)
