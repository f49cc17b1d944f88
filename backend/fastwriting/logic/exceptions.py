"""Typed domain exceptions for the typing game core.

Player input never raises: empty, repeated and wrong submissions are modelled
as events. The exceptions below signal programmer errors (bad construction data,
calls made in the wrong lifecycle phase) and are not caught inside the core.
"""


class FastWritingError(Exception):
    """Base exception for typing game core errors."""


class InvalidContentError(FastWritingError, ValueError):
    """Content bank data violates its invariants (missing tier, empty tier, blank entry)."""


class GameNotStartedError(FastWritingError):
    """An inbound game operation was called before the game was started."""


class StatisticsFinalizedError(FastWritingError):
    """Statistics were finalized a second time.

    A session finalizes its statistics exactly once, on the transition to ENDED.
    """
