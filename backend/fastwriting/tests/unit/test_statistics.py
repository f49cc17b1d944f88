import pytest

from fastwriting.logic.enums import PerformanceRating
from fastwriting.logic.exceptions import StatisticsFinalizedError
from fastwriting.logic.statistics import StatisticsTracker, encouragement_for_level, rating_for_level
from fastwriting.tests.helpers.game import SteppingClock


class TestCounters:
    def test_fresh_tracker_is_empty(self, wall_clock):
        stats = StatisticsTracker(now=wall_clock)
        assert stats.words_attempted == 0
        assert stats.correct_words == 0
        assert stats.incorrect_words == 0
        assert stats.total_time_spent == 0
        assert stats.final_level == 1
        assert stats.start_time == wall_clock.current
        assert stats.end_time is None

    def test_record_correct_accumulates_time(self):
        stats = StatisticsTracker()
        stats.record_correct(3)
        stats.record_correct(4)
        assert stats.correct_words == 2
        assert stats.total_time_spent == 7

    def test_negative_time_spent_counts_as_zero(self):
        stats = StatisticsTracker()
        stats.record_correct(-2)
        assert stats.total_time_spent == 0


class TestAccuracy:
    def test_no_attempts_is_zero(self):
        assert StatisticsTracker().accuracy_percentage == 0.0

    def test_three_of_four(self):
        stats = StatisticsTracker()
        for _ in range(4):
            stats.record_attempt()
        for _ in range(3):
            stats.record_correct(1)
        stats.record_incorrect()
        assert stats.accuracy_percentage == pytest.approx(75.0)


class TestWordsPerMinute:
    def test_zero_duration_is_zero(self, wall_clock):
        stats = StatisticsTracker(now=wall_clock)
        stats.record_correct(1)
        stats.finalize(2)
        assert stats.words_per_minute == 0.0

    def test_no_correct_words_is_zero(self, wall_clock):
        stats = StatisticsTracker(now=wall_clock)
        wall_clock.advance(30)
        stats.finalize(1)
        assert stats.words_per_minute == 0.0

    def test_uses_whole_seconds(self, wall_clock):
        stats = StatisticsTracker(now=wall_clock)
        for _ in range(5):
            stats.record_correct(2)
        wall_clock.advance(30.9)
        stats.finalize(6)
        assert stats.session_duration_seconds == 30
        assert stats.words_per_minute == pytest.approx(10.0)

    def test_running_session_measures_to_now(self, wall_clock):
        stats = StatisticsTracker(now=wall_clock)
        wall_clock.advance(90)
        assert stats.session_duration_seconds == 90


class TestFinalize:
    def test_stamps_end_time_and_level(self, wall_clock):
        stats = StatisticsTracker(now=wall_clock)
        wall_clock.advance(12)
        stats.finalize(7)
        assert stats.is_finalized is True
        assert stats.final_level == 7
        assert stats.end_time == wall_clock.current

    def test_duration_frozen_after_finalize(self, wall_clock):
        stats = StatisticsTracker(now=wall_clock)
        wall_clock.advance(10)
        stats.finalize(1)
        wall_clock.advance(100)
        assert stats.session_duration_seconds == 10

    def test_second_finalize_rejected(self):
        stats = StatisticsTracker()
        stats.finalize(3)
        with pytest.raises(StatisticsFinalizedError, match="already finalized"):
            stats.finalize(4)
        assert stats.final_level == 3


class TestRating:
    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (1, PerformanceRating.BEGINNER),
            (9, PerformanceRating.BEGINNER),
            (10, PerformanceRating.INTERMEDIATE),
            (20, PerformanceRating.ADVANCED),
            (30, PerformanceRating.EXPERT),
            (40, PerformanceRating.MASTER),
            (50, PerformanceRating.LEGENDARY),
            (75, PerformanceRating.LEGENDARY),
        ],
    )
    def test_bands(self, level, expected):
        assert rating_for_level(level) == expected

    def test_tracker_rating_follows_final_level(self):
        stats = StatisticsTracker()
        stats.finalize(22)
        assert stats.performance_rating == PerformanceRating.ADVANCED

    def test_encouragement_bands(self):
        assert encouragement_for_level(1).startswith("KEEP PRACTICING!")
        assert encouragement_for_level(5).startswith("NICE TRY!")
        assert encouragement_for_level(12).startswith("GOOD WORK!")
        assert encouragement_for_level(55).startswith("LEGENDARY!")


class TestReporting:
    def test_snapshot_copies_values(self):
        clock = SteppingClock()
        stats = StatisticsTracker(now=clock)
        stats.record_attempt()
        stats.record_correct(5)
        clock.advance(65)
        stats.finalize(2)

        snapshot = stats.snapshot()
        assert snapshot.final_level == 2
        assert snapshot.words_attempted == 1
        assert snapshot.correct_words == 1
        assert snapshot.accuracy_percentage == pytest.approx(100.0)
        assert snapshot.session_duration_seconds == 65
        assert snapshot.performance_rating == PerformanceRating.BEGINNER
        assert snapshot.end_time == clock.current

        stats.record_attempt()
        assert snapshot.words_attempted == 1

    def test_summary_lines(self):
        clock = SteppingClock()
        stats = StatisticsTracker(now=clock)
        for _ in range(4):
            stats.record_attempt()
        for _ in range(3):
            stats.record_correct(2)
        stats.record_incorrect()
        clock.advance(65)
        stats.finalize(4)

        lines = stats.summary().splitlines()
        assert lines[0] == "Game Statistics:"
        assert "Final Level: 4" in lines
        assert "Accuracy: 75.0%" in lines
        assert "Performance Rating: Beginner Typist" in lines
        assert "Session Duration: 1 minutes 5 seconds" in lines
