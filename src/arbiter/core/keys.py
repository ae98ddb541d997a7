"""Position keys for repetition bookkeeping."""

from __future__ import annotations

from arbiter.core.board import Board
from arbiter.core.enums import Color
from arbiter.core.rights import CastlingRights
from arbiter.core.types import Square


def generate_position_key(
    board: Board,
    side_to_move: Color,
    castling: CastlingRights,
    en_passant: Square | None,
) -> str:
    """Canonical text key of everything that makes two positions "the same".

    Layout: 64 placement characters (FEN letters, ``.`` for empty), the side
    to move, the six moved flags as ``0``/``1``, and the en passant index or
    ``-``, separated by spaces. Clocks are not part of the key.
    """
    placement = "".join("." if p is None else str(p) for p in board)
    side = "w" if side_to_move == Color.WHITE else "b"
    flags = "".join("1" if flag else "0" for flag in castling.as_flags())
    ep = "-" if en_passant is None else str(en_passant)
    return f"{placement} {side} {flags} {ep}"
