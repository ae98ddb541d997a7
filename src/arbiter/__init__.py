"""Standard chess rules engine: legal moves, check, mate and draw detection."""

from arbiter.core import (
    STARTING_FEN,
    Board,
    CastlingRights,
    Color,
    EndReason,
    GameResult,
    IllegalMoveError,
    Move,
    Piece,
    PieceType,
    Position,
    RulesOptions,
    apply_move,
    generate_all_legal_moves,
    generate_position_key,
    has_insufficient_material,
    initial,
    is_checkmate,
    is_in_check,
    is_stalemate,
    parse_move,
    position_from_fen,
    position_to_fen,
)
from arbiter.game import GameRecord

__version__ = "0.1.0"

__all__ = [
    "STARTING_FEN",
    "Board",
    "CastlingRights",
    "Color",
    "EndReason",
    "GameRecord",
    "GameResult",
    "IllegalMoveError",
    "Move",
    "Piece",
    "PieceType",
    "Position",
    "RulesOptions",
    "apply_move",
    "generate_all_legal_moves",
    "generate_position_key",
    "has_insufficient_material",
    "initial",
    "is_checkmate",
    "is_in_check",
    "is_stalemate",
    "parse_move",
    "position_from_fen",
    "position_to_fen",
]
