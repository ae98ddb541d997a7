"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from arbiter.core import apply_move, initial, parse_move

    pos = initial()
    pos = apply_move(pos, parse_move(pos, "e2e4"))
    for move in pos.legal_moves:
        print(move)
"""

from arbiter.core.attacks import is_in_check, is_square_attacked
from arbiter.core.board import Board
from arbiter.core.enums import Color, EndReason, GameResult, PieceType
from arbiter.core.errors import ArbiterError, FenError, GameOverError, IllegalMoveError
from arbiter.core.fen import STARTING_FEN, position_from_fen, position_to_fen
from arbiter.core.keys import generate_position_key
from arbiter.core.move import Move
from arbiter.core.move_generator import MoveGenerator, generate_all_legal_moves
from arbiter.core.options import DEFAULT_OPTIONS, RulesOptions
from arbiter.core.perft import divide, perft
from arbiter.core.piece import Piece
from arbiter.core.position import (
    Position,
    agree_draw,
    apply_move,
    initial,
    lose_on_time,
    parse_move,
    resign,
)
from arbiter.core.rights import CastlingRights
from arbiter.core.rules import (
    Rules,
    has_insufficient_material,
    is_checkmate,
    is_stalemate,
)
from arbiter.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "EndReason",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "CastlingRights",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "RulesOptions",
    "DEFAULT_OPTIONS",
    # Errors
    "ArbiterError",
    "FenError",
    "GameOverError",
    "IllegalMoveError",
    # Operations
    "agree_draw",
    "apply_move",
    "divide",
    "generate_all_legal_moves",
    "generate_position_key",
    "has_insufficient_material",
    "initial",
    "is_checkmate",
    "is_in_check",
    "is_square_attacked",
    "is_stalemate",
    "lose_on_time",
    "parse_move",
    "perft",
    "resign",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
