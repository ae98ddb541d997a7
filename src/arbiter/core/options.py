"""Rule-engine options, passed explicitly to the transition functions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RulesOptions:
    """Knobs for :func:`arbiter.core.position.apply_move`.

    ``validate_moves=False`` restores the permissive behaviour: the move is
    executed as given, without checking it against the legal-move set or the
    game status.
    """

    validate_moves: bool = True
    fifty_move_threshold: int = 100  # half-moves
    repetition_threshold: int = 3

    def __post_init__(self) -> None:
        if self.fifty_move_threshold < 1:
            raise ValueError(
                f"fifty_move_threshold must be positive: {self.fifty_move_threshold!r}"
            )
        if self.repetition_threshold < 2:
            raise ValueError(
                f"repetition_threshold must be at least 2: {self.repetition_threshold!r}"
            )


DEFAULT_OPTIONS = RulesOptions()
