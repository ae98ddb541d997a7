"""FEN parsing and serialization."""

from __future__ import annotations

from arbiter.core.board import Board
from arbiter.core.enums import Color, PieceType
from arbiter.core.errors import FenError
from arbiter.core.options import DEFAULT_OPTIONS, RulesOptions
from arbiter.core.piece import Piece
from arbiter.core.position import Position
from arbiter.core.rights import CastlingRights
from arbiter.core.types import Square, make_square, parse_square, row_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def _castling_from_field(field: str) -> CastlingRights:
    if field == "-":
        return CastlingRights.all_lost()
    seen: set[str] = set()
    for ch in field:
        if ch not in "KQkq" or ch in seen:
            raise FenError(f"Invalid FEN castling field: {field!r}")
        seen.add(ch)
    white_any = "K" in seen or "Q" in seen
    black_any = "k" in seen or "q" in seen
    return CastlingRights(
        white_king_moved=not white_any,
        black_king_moved=not black_any,
        white_rook_a_moved="Q" not in seen,
        white_rook_h_moved="K" not in seen,
        black_rook_a_moved="q" not in seen,
        black_rook_h_moved="k" not in seen,
    )


def _castling_to_field(castling: CastlingRights) -> str:
    text = ""
    if castling.can_castle_kingside(Color.WHITE):
        text += "K"
    if castling.can_castle_queenside(Color.WHITE):
        text += "Q"
    if castling.can_castle_kingside(Color.BLACK):
        text += "k"
    if castling.can_castle_queenside(Color.BLACK):
        text += "q"
    return text or "-"


def position_from_fen(fen: str, options: RulesOptions = DEFAULT_OPTIONS) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise FenError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement, rank 8 first
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    cells: list[Piece | None] = [None] * 64
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise FenError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise FenError(f"Invalid FEN rank width: {fen!r}")
                try:
                    cells[make_square(row, col)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise FenError(f"{exc}: {fen!r}") from None
                col += 1
            if col > 8:
                raise FenError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise FenError(f"Invalid FEN rank width: {fen!r}")
    board = Board(cells)
    for color in (Color.WHITE, Color.BLACK):
        if len(board.pieces(color, PieceType.KING)) > 1:
            raise FenError(f"Invalid FEN: more than one {color} king: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise FenError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = _castling_from_field(castling_part)

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except ValueError:
            raise FenError(f"Invalid FEN en-passant square: {ep_part!r}") from None
        expected_ep_row = 2 if side == Color.WHITE else 5  # rank 6 / rank 3
        if row_of(ep) != expected_ep_row:
            raise FenError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Clocks (optional)
    try:
        halfmove = int(parts[4]) if len(parts) > 4 else 0
        fullmove = int(parts[5]) if len(parts) > 5 else 1
    except ValueError:
        raise FenError(f"Invalid FEN clock fields: {fen!r}") from None
    if halfmove < 0:
        raise FenError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    if fullmove < 1:
        raise FenError(f"Invalid FEN fullmove number: {parts[5]!r}")

    return Position.setup(board, side, castling, ep, halfmove, fullmove, options=options)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = pos.board[make_square(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    castling_str = _castling_to_field(pos.castling)
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
