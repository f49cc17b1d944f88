"""
String enum definitions for typing game concepts.
"""

from enum import StrEnum


class Tier(StrEnum):
    """Difficulty bands, each with its own content pool. Declaration order is difficulty order."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"
    SHORT_PHRASE = "short_phrase"
    COMPLEX_PHRASE = "complex_phrase"

    @property
    def rank(self) -> int:
        """Zero-based position of the tier in difficulty order."""
        return list(Tier).index(self)


class SessionStatus(StrEnum):
    ACTIVE = "active"
    ENDED = "ended"


class EndReason(StrEnum):
    """Why a session left the ACTIVE state."""

    TIME_UP = "time_up"
    VOLUNTARY = "voluntary"
    INCORRECT = "incorrect"  # strict mode only


class PerformanceRating(StrEnum):
    BEGINNER = "Beginner Typist"
    INTERMEDIATE = "Intermediate Typist"
    ADVANCED = "Advanced Typist"
    EXPERT = "Expert Typist"
    MASTER = "Master Typist"
    LEGENDARY = "Legendary Typist"


class TimerUrgency(StrEnum):
    """How close the countdown is to expiring, for display styling."""

    NORMAL = "normal"
    WARNING = "warning"
    DANGER = "danger"
