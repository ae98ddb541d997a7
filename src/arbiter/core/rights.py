"""Castling rights as six monotone "has moved" flags."""

from __future__ import annotations

from dataclasses import dataclass, replace

from arbiter.core.enums import Color
from arbiter.core.move import Move
from arbiter.core.types import A1, A8, E1, E8, H1, H8, Square

# Home squares of the pieces whose first move (or capture) forfeits castling.
_HOME_FLAGS: tuple[tuple[Square, str], ...] = (
    (E1, "white_king_moved"),
    (E8, "black_king_moved"),
    (A1, "white_rook_a_moved"),
    (H1, "white_rook_h_moved"),
    (A8, "black_rook_a_moved"),
    (H8, "black_rook_h_moved"),
)


@dataclass(frozen=True, slots=True)
class CastlingRights:
    """Which kings and rooks have left (or been captured on) their home squares.

    Flags only ever go from False to True.
    """

    white_king_moved: bool = False
    black_king_moved: bool = False
    white_rook_a_moved: bool = False
    white_rook_h_moved: bool = False
    black_rook_a_moved: bool = False
    black_rook_h_moved: bool = False

    @classmethod
    def all_lost(cls) -> CastlingRights:
        return cls(True, True, True, True, True, True)

    def after_move(self, move: Move) -> CastlingRights:
        """Flags after *move*: any move touching a home square sets its flag."""
        touched = (move.from_sq, move.to_sq)
        changed = {
            name: True
            for sq, name in _HOME_FLAGS
            if sq in touched and not getattr(self, name)
        }
        if not changed:
            return self
        return replace(self, **changed)

    def can_castle_kingside(self, color: Color) -> bool:
        if color == Color.WHITE:
            return not (self.white_king_moved or self.white_rook_h_moved)
        return not (self.black_king_moved or self.black_rook_h_moved)

    def can_castle_queenside(self, color: Color) -> bool:
        if color == Color.WHITE:
            return not (self.white_king_moved or self.white_rook_a_moved)
        return not (self.black_king_moved or self.black_rook_a_moved)

    def as_flags(self) -> tuple[bool, bool, bool, bool, bool, bool]:
        return (
            self.white_king_moved,
            self.black_king_moved,
            self.white_rook_a_moved,
            self.white_rook_h_moved,
            self.black_rook_a_moved,
            self.black_rook_h_moved,
        )
