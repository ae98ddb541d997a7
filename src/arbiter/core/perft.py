"""Perft node counting for move-generator verification.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

from __future__ import annotations

from arbiter.core.options import RulesOptions
from arbiter.core.position import Position, apply_move

# Terminal positions still expand their legal moves in perft; only the
# board geometry matters here.
_PERFT_OPTIONS = RulesOptions(validate_moves=False)


def perft(position: Position, depth: int) -> int:
    """Count leaf nodes at *depth*.

    - depth == 0 returns 1 (the current node).
    - depth > 0 returns the sum over all legal children's perft(depth-1).
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if depth == 0:
        return 1
    if depth == 1:
        return len(position.legal_moves)
    return sum(
        perft(apply_move(position, move, _PERFT_OPTIONS), depth - 1)
        for move in position.legal_moves
    )


def divide(position: Position, depth: int) -> dict[str, int]:
    """Per-root-move perft counts, keyed by long-algebraic move text."""
    if depth < 1:
        raise ValueError("depth must be >= 1")
    return {
        str(move): perft(apply_move(position, move, _PERFT_OPTIONS), depth - 1)
        for move in position.legal_moves
    }
