"""Game layer: move history over immutable position snapshots."""

from arbiter.game.record import GameRecord

__all__ = ["GameRecord"]
