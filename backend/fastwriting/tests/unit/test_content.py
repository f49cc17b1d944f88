import random

import pytest

from fastwriting.logic.content import ContentBank, validate_content
from fastwriting.logic.enums import Tier
from fastwriting.logic.exceptions import InvalidContentError
from fastwriting.logic.word_lists import DEFAULT_CONTENT, EASY_WORDS
from fastwriting.tests.helpers.game import SINGLE_ENTRY_CONTENT


class TestDefaultContent:
    def test_every_tier_has_entries(self):
        bank = ContentBank()
        for tier in Tier:
            assert len(bank.words_for_tier(tier)) > 0

    def test_entries_are_not_blank(self):
        for entries in DEFAULT_CONTENT.values():
            assert all(entry.strip() for entry in entries)

    def test_entries_are_unique_within_tier(self):
        for entries in DEFAULT_CONTENT.values():
            assert len(set(entries)) == len(entries)

    def test_total_content_count_matches_tier_counts(self):
        bank = ContentBank()
        assert bank.total_content_count() == sum(bank.tier_counts().values())

    def test_tier_counts_cover_all_tiers(self):
        bank = ContentBank()
        assert set(bank.tier_counts()) == set(Tier)
        assert bank.tier_counts()[Tier.EASY] == len(EASY_WORDS)


class TestPickRandom:
    def test_pick_comes_from_requested_tier(self):
        bank = ContentBank(rng=random.Random(7))
        for tier in Tier:
            for _ in range(20):
                assert bank.pick_random(tier) in bank.words_for_tier(tier)

    def test_same_seed_gives_same_sequence(self):
        first = ContentBank(rng=random.Random(123))
        second = ContentBank(rng=random.Random(123))
        picks_a = [first.pick_random(Tier.HARD) for _ in range(10)]
        picks_b = [second.pick_random(Tier.HARD) for _ in range(10)]
        assert picks_a == picks_b

    def test_single_entry_tier_always_returns_it(self):
        bank = ContentBank(SINGLE_ENTRY_CONTENT)
        assert {bank.pick_random(Tier.EASY) for _ in range(5)} == {"cat"}


class TestImmutability:
    def test_source_mutation_does_not_leak_in(self):
        source = {tier: list(words) for tier, words in SINGLE_ENTRY_CONTENT.items()}
        bank = ContentBank(source)
        source[Tier.EASY].append("dog")
        assert bank.words_for_tier(Tier.EASY) == ("cat",)

    def test_words_for_tier_returns_tuple(self):
        bank = ContentBank()
        assert isinstance(bank.words_for_tier(Tier.MEDIUM), tuple)


class TestValidateContent:
    def test_missing_tier_rejected(self):
        content = {tier: words for tier, words in SINGLE_ENTRY_CONTENT.items() if tier != Tier.EXPERT}
        with pytest.raises(InvalidContentError, match="expert"):
            ContentBank(content)

    def test_empty_tier_rejected(self):
        content = {**SINGLE_ENTRY_CONTENT, Tier.MEDIUM: []}
        with pytest.raises(InvalidContentError, match="no content"):
            validate_content(content)

    def test_blank_entry_rejected(self):
        content = {**SINGLE_ENTRY_CONTENT, Tier.HARD: ["algorithm", "   "]}
        with pytest.raises(InvalidContentError, match="blank entry"):
            validate_content(content)

    def test_invalid_content_error_is_value_error(self):
        with pytest.raises(ValueError):  # noqa: PT011
            validate_content({})
