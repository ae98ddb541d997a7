"""Game record: the sequence of snapshots played so far, with undo and replay."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from arbiter.core.enums import Color, GameResult
from arbiter.core.move import Move
from arbiter.core.options import DEFAULT_OPTIONS, RulesOptions
from arbiter.core.position import (
    Position,
    agree_draw,
    apply_move,
    lose_on_time,
    resign,
)

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Holds every snapshot of one game, oldest first.

    Snapshots are immutable, so undo just drops the newest one and replay
    re-derives the line from the first snapshot. No threading, no I/O.
    """

    start: Position = field(default_factory=Position.initial)
    options: RulesOptions = DEFAULT_OPTIONS
    snapshots: list[Position] = field(init=False)
    _before_ending: Position | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.snapshots = [self.start]

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def current(self) -> Position:
        return self.snapshots[-1]

    @property
    def moves(self) -> list[Move]:
        """Moves played from the start, in order."""
        return [s.last_move for s in self.snapshots[1:] if s.last_move is not None]

    @property
    def ply_count(self) -> int:
        return len(self.snapshots) - 1

    @property
    def result(self) -> GameResult:
        return self.current.result

    # ── Mutation ─────────────────────────────────────────────────────────

    def play(self, move: Move) -> Position:
        """Apply *move* to the current snapshot and record the result."""
        nxt = apply_move(self.current, move, self.options)
        self.snapshots.append(nxt)
        # An ending followed by a ply is no longer the newest snapshot.
        self._before_ending = None
        return nxt

    def undo(self) -> Position | None:
        """Drop the newest snapshot; returns it, or None at the start.

        Undoing a resignation, agreed draw or time-out restores the snapshot
        it replaced.
        """
        if self._before_ending is not None:
            undone = self.snapshots[-1]
            self.snapshots[-1] = self._before_ending
            self._before_ending = None
            return undone
        if len(self.snapshots) == 1:
            return None
        undone = self.snapshots.pop()
        _LOGGER.debug("Undid %s", undone.last_move)
        return undone

    def resign(self, color: Color) -> Position:
        return self._push(resign(self.current, color))

    def agree_draw(self) -> Position:
        return self._push(agree_draw(self.current))

    def lose_on_time(self, color: Color) -> Position:
        return self._push(lose_on_time(self.current, color))

    def _push(self, position: Position) -> Position:
        # Off-board endings replace the current snapshot; they are not plies.
        self._before_ending = self.snapshots[-1]
        self.snapshots[-1] = position
        return position

    # ── Replay ───────────────────────────────────────────────────────────

    def replay(self) -> Position:
        """Re-apply the recorded moves from the start and return the final snapshot.

        Replaying an unchanged record yields a position equal to the on-board
        state of :attr:`current`.
        """
        position = self.start
        for move in self.moves:
            position = apply_move(position, move, self.options)
        return position
