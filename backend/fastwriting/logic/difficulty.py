"""Map level numbers to tiers, labels and countdown lengths."""

from __future__ import annotations

from fastwriting.logic.enums import Tier
from fastwriting.logic.settings import GameSettings

MAX_PROGRESS_LEVEL = 50  # level at which the progress indicator is full

# upper bound (inclusive) of each bounded band; levels above the last bound are COMPLEX_PHRASE
_TIER_BANDS: tuple[tuple[int, Tier], ...] = (
    (10, Tier.EASY),
    (20, Tier.MEDIUM),
    (30, Tier.HARD),
    (40, Tier.EXPERT),
    (50, Tier.SHORT_PHRASE),
)

TIER_LABELS: dict[Tier, str] = {
    Tier.EASY: "Easy",
    Tier.MEDIUM: "Medium",
    Tier.HARD: "Hard",
    Tier.EXPERT: "Expert",
    Tier.SHORT_PHRASE: "Master",
    Tier.COMPLEX_PHRASE: "Legendary",
}


def _validate_level(level: int) -> None:
    if level < 1:
        raise ValueError(f"level must be >= 1, got {level}")


class DifficultyPolicy:
    """
    Difficulty rules driven by the current level.

    Tiers use fixed bands of ten levels. The countdown starts at
    ``initial_time_limit`` and shrinks by ``time_limit_step`` each time the
    player crosses into the first level of a new ``levels_per_time_step`` block
    (levels 6, 11, 16, ... with the defaults), never going below ``min_time_limit``.
    """

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings or GameSettings()

    def tier_for_level(self, level: int) -> Tier:
        _validate_level(level)
        for upper_bound, tier in _TIER_BANDS:
            if level <= upper_bound:
                return tier
        return Tier.COMPLEX_PHRASE

    def label_for_level(self, level: int) -> str:
        return TIER_LABELS[self.tier_for_level(level)]

    def initial_time_limit(self) -> int:
        return self._settings.initial_time_limit

    def next_time_limit(self, current_limit: int, new_level: int) -> int:
        """Return the countdown length for ``new_level`` given the limit in force before it."""
        step_block = self._settings.levels_per_time_step
        floor = self._settings.min_time_limit
        crossed_boundary = new_level > 1 and (new_level - 1) % step_block == 0
        if crossed_boundary and current_limit > floor:
            return max(floor, current_limit - self._settings.time_limit_step)
        return current_limit

    def progress_for_level(self, level: int) -> float:
        """Fraction of the visual progress bar filled at ``level`` (capped at 1.0)."""
        _validate_level(level)
        return min(1.0, level / MAX_PROGRESS_LEVEL)
