"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from arbiter.core.enums import Color, PieceType

# Indexed by PieceType value; slot 0 is unused.
_LETTERS = " pnbrqk"
_WHITE_GLYPHS = " ♙♘♗♖♕♔"
_BLACK_GLYPHS = " ♟♞♝♜♛♚"


@dataclass(frozen=True, slots=True)
class Piece:
    """A coloured piece. Equal pieces compare and hash equal."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN letter: uppercase for White, lowercase for Black."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Inverse of ``str(piece)``: ``"N"`` is a white knight, ``"n"`` a black one."""
        index = _LETTERS.find(char.lower()) if len(char) == 1 else -1
        if index < 1:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, PieceType(index))

    @property
    def symbol(self) -> str:
        glyphs = _WHITE_GLYPHS if self.color == Color.WHITE else _BLACK_GLYPHS
        return glyphs[self.piece_type]
