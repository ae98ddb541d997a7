"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from arbiter.core.position import Position, apply_move, initial, parse_move

PlayLine = Callable[..., Position]


def _play(moves: Iterable[str], start: Position | None = None) -> Position:
    position = start if start is not None else initial()
    for text in moves:
        position = apply_move(position, parse_move(position, text))
    return position


@pytest.fixture
def play_line() -> PlayLine:
    """Apply long-algebraic moves (``"e2e4"``) from a start position."""
    return _play
