"""Immutable tiered word and phrase bank."""

from __future__ import annotations

import random
from types import MappingProxyType
from typing import TYPE_CHECKING

from fastwriting.logic.enums import Tier
from fastwriting.logic.exceptions import InvalidContentError
from fastwriting.logic.word_lists import DEFAULT_CONTENT

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def validate_content(content: Mapping[Tier, Sequence[str]]) -> None:
    """Check that every tier has at least one non-blank entry.

    Raises InvalidContentError naming the first offending tier.
    """
    for tier in Tier:
        entries = content.get(tier)
        if not entries:
            raise InvalidContentError(f"tier {tier.value!r} has no content")
        if any(not entry.strip() for entry in entries):
            raise InvalidContentError(f"tier {tier.value!r} contains a blank entry")


class ContentBank:
    """
    Fixed content lists, one ordered sequence per tier.

    Content is copied into tuples at construction and exposed read-only.
    Selection uses the injected ``random.Random`` so tests can seed it.
    """

    def __init__(
        self,
        content: Mapping[Tier, Sequence[str]] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        source = DEFAULT_CONTENT if content is None else content
        validate_content(source)
        self._content: Mapping[Tier, tuple[str, ...]] = MappingProxyType(
            {tier: tuple(source[tier]) for tier in Tier},
        )
        self._rng = rng or random.Random()  # noqa: S311

    def words_for_tier(self, tier: Tier) -> tuple[str, ...]:
        return self._content[tier]

    def pick_random(self, tier: Tier) -> str:
        """Return a uniformly chosen entry of the tier."""
        return self._rng.choice(self._content[tier])

    def tier_counts(self) -> dict[Tier, int]:
        return {tier: len(words) for tier, words in self._content.items()}

    def total_content_count(self) -> int:
        return sum(len(words) for words in self._content.values())
