"""
RateLimiter — Token bucket guarding boss-quest generation calls.

Each profile refresh can trigger a model call. Generation happens behind
an interactive page, so a caller never waits for a token: when the bucket
is empty the generation call is skipped and yields no boss quests.
Every generator owns its bucket.
"""

import time
import logging
from typing import Callable

logger = logging.getLogger('RateLimiter')


class RateLimiter:
    """Non-blocking token bucket.

    Args:
        max_tokens: Maximum burst size.
        refill_rate: Tokens added per second.
        name: Label for logging.
        clock: Monotonic time source, swappable in tests.
    """

    def __init__(self, max_tokens: int = 5, refill_rate: float = 0.1, name: str = "boss_quests",
                 clock: Callable[[], float] = time.monotonic):
        if max_tokens < 1 or refill_rate <= 0:
            raise ValueError("max_tokens must be >= 1 and refill_rate > 0")
        self.max_tokens = max_tokens
        self.refill_rate = refill_rate
        self.name = name
        self._clock = clock
        self._tokens = float(max_tokens)
        self._last_refill = clock()

    def _refill(self):
        now = self._clock()
        self._tokens = min(self.max_tokens, self._tokens + (now - self._last_refill) * self.refill_rate)
        self._last_refill = now

    def try_acquire(self) -> bool:
        """Consume one token if available. Returns False when rate limited."""
        self._refill()
        if self._tokens < 1.0:
            logger.warning(f"[{self.name}] Rate limited, next token in {self.retry_after:.1f}s")
            return False
        self._tokens -= 1.0
        return True

    @property
    def available(self) -> float:
        """Current number of available tokens (without consuming)."""
        self._refill()
        return self._tokens

    @property
    def retry_after(self) -> float:
        """Seconds until the next whole token, 0 if one is available now."""
        missing = 1.0 - self.available
        return max(0.0, missing / self.refill_rate)
