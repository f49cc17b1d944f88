"""
Pluggable callback scheduling for countdowns and delayed transitions.

The game core never sleeps or owns an event loop. It asks a Scheduler to run a
callback once after a delay or repeatedly at an interval, and keeps the returned
ScheduledCall so it can cancel it. AsyncioScheduler drives real games on the
running event loop; VirtualScheduler advances a virtual clock for tests.

Callbacks are synchronous and run one at a time in both implementations.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

logger = structlog.get_logger()


class ScheduledCall(ABC):
    """Handle for a pending one-shot or periodic callback."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop the callback from firing again. Safe to call more than once."""
        ...

    @property
    @abstractmethod
    def cancelled(self) -> bool: ...


class Scheduler(ABC):
    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Run ``callback`` once after ``delay`` seconds."""
        ...

    @abstractmethod
    def call_every(self, interval: float, callback: Callable[[], None]) -> ScheduledCall:
        """Run ``callback`` every ``interval`` seconds until cancelled."""
        ...


# ---------------------------------------------------------------------------
# asyncio
# ---------------------------------------------------------------------------


class _TaskCall(ScheduledCall):
    def __init__(self) -> None:
        self._task: asyncio.Task[None] | None = None
        self._cancelled = False

    def attach(self, task: asyncio.Task[None]) -> None:
        self._task = task

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        if self._task is not None and not self._task.done():
            self._task.cancel()


class AsyncioScheduler(Scheduler):
    """
    Schedule callbacks as tasks on the running asyncio event loop.

    Periodic calls track an absolute deadline so a slow callback does not push
    later ticks back. A callback that raises is logged and ends its schedule.
    Must be used from inside a running loop.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = _TaskCall()
        call.attach(asyncio.create_task(self._run_once(call, delay, callback)))
        return call

    def call_every(self, interval: float, callback: Callable[[], None]) -> ScheduledCall:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        call = _TaskCall()
        call.attach(asyncio.create_task(self._run_periodic(call, interval, callback)))
        return call

    async def _run_once(self, call: _TaskCall, delay: float, callback: Callable[[], None]) -> None:
        try:
            await asyncio.sleep(delay)
            if not call.cancelled:
                callback()
        except asyncio.CancelledError:
            pass
        except (RuntimeError, ValueError, TypeError, KeyError):  # fmt: skip
            logger.exception("scheduled callback failed")

    async def _run_periodic(self, call: _TaskCall, interval: float, callback: Callable[[], None]) -> None:
        loop = asyncio.get_running_loop()
        next_at = loop.time() + interval
        try:
            while not call.cancelled:
                await asyncio.sleep(max(0.0, next_at - loop.time()))
                if call.cancelled:
                    return
                callback()
                next_at += interval
        except asyncio.CancelledError:
            pass
        except (RuntimeError, ValueError, TypeError, KeyError):  # fmt: skip
            logger.exception("periodic callback failed")


# ---------------------------------------------------------------------------
# Virtual time
# ---------------------------------------------------------------------------


class _VirtualCall(ScheduledCall):
    def __init__(self, callback: Callable[[], None], interval: float | None) -> None:
        self.callback = callback
        self.interval = interval
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class VirtualScheduler(Scheduler):
    """
    Deterministic scheduler driven by explicit ``advance()`` calls.

    Nothing fires until time is advanced. Due callbacks run in deadline order;
    callbacks due at the same instant run in the order they were scheduled.
    Callbacks may schedule or cancel other calls while running.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: list[tuple[float, int, _VirtualCall]] = []
        self._sequence = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending_count(self) -> int:
        """Number of scheduled calls that have not been cancelled."""
        return sum(1 for _, _, call in self._queue if not call.cancelled)

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = _VirtualCall(callback, interval=None)
        self._push(self._now + max(0.0, delay), call)
        return call

    def call_every(self, interval: float, callback: Callable[[], None]) -> ScheduledCall:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        call = _VirtualCall(callback, interval=interval)
        self._push(self._now + interval, call)
        return call

    def advance(self, seconds: float) -> None:
        """Move virtual time forward, firing every callback that falls due."""
        if seconds < 0:
            raise ValueError(f"cannot advance by a negative amount: {seconds}")
        target = self._now + seconds
        while self._queue and self._queue[0][0] <= target:
            due, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self._now = due
            call.callback()
            if call.interval is not None and not call.cancelled:
                self._push(due + call.interval, call)
        self._now = target

    def _push(self, due: float, call: _VirtualCall) -> None:
        heapq.heappush(self._queue, (due, next(self._sequence), call))
