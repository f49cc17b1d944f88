"""Token bucket rate limiter for WebSocket message throttling."""

import time


class TokenBucket:
    """Allow short bursts of messages while capping the sustained rate.

    The bucket holds up to ``burst`` tokens and refills at ``rate`` tokens per
    second. Each accepted message spends one token.
    """

    def __init__(self, rate: float, burst: int) -> None:
        if rate <= 0 or burst < 1:
            raise ValueError(f"rate must be positive and burst >= 1, got rate={rate} burst={burst}")
        self._rate = rate
        self._burst = burst
        self._tokens = float(burst)
        self._last_refill = time.monotonic()

    @property
    def tokens(self) -> float:
        return self._tokens

    def consume(self) -> bool:
        """Spend one token. Returns False (throttle) when none is available."""
        now = time.monotonic()
        self._tokens = min(self._burst, self._tokens + (now - self._last_refill) * self._rate)
        self._last_refill = now
        if self._tokens < 1.0:
            return False
        self._tokens -= 1.0
        return True
