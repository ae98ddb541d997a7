"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from arbiter.core.enums import PieceType
from arbiter.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    Castling is a single king move; the rook relocation is implied.
    ``captured_sq`` is only set for en passant, where the captured pawn
    does not stand on ``to_sq``.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    is_castling: bool = False
    is_en_passant: bool = False
    captured_sq: Square | None = None

    def __post_init__(self) -> None:
        if not (0 <= self.from_sq < 64 and 0 <= self.to_sq < 64):
            raise ValueError(f"Square out of range: {self.from_sq}->{self.to_sq}")
        if self.promotion is not None and self.promotion not in _PROMO_CHARS:
            raise ValueError(f"Invalid promotion piece: {self.promotion!r}")

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base


def promotion_from_char(char: str) -> PieceType:
    """Map ``q``/``r``/``b``/``n`` (any case) to a promotion piece type."""
    for ptype, promo_char in _PROMO_CHARS.items():
        if promo_char == char.lower():
            return ptype
    raise ValueError(f"Invalid promotion character: {char!r}")
