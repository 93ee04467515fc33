"""Async token-bucket rate limiters, one for reads and one for writes."""

from __future__ import annotations

import asyncio
import logging
import time

logger = logging.getLogger(__name__)

READ_METHOD = "GET"


class TokenBucketRateLimiter:
    """Rate limiter using the token-bucket algorithm.

    Usage::

        limiter = TokenBucketRateLimiter(rate=1.9, per=1.0)  # 1.9 requests per second
        async with limiter:
            await make_api_call()

    Waiters queue on an internal lock, so tokens are handed out in arrival
    order. A waiter cancelled while sleeping consumes no token.
    """

    def __init__(self, rate: float, per: float = 1.0, burst: int | None = None) -> None:
        self.rate = rate
        self.per = per
        self.burst = burst or max(1, int(rate))
        self._tokens = float(self.burst)
        self._last_refill = time.monotonic()
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        """Wait until a token is available, then consume it."""
        async with self._lock:
            now = time.monotonic()
            elapsed = now - self._last_refill
            self._tokens = min(
                self.burst,
                self._tokens + elapsed * (self.rate / self.per),
            )
            self._last_refill = now

            if self._tokens < 1.0:
                wait = (1.0 - self._tokens) * (self.per / self.rate)
                logger.debug("Rate limit reached, waiting %.3fs for a token", wait)
                await asyncio.sleep(wait)
                self._tokens = 0.0
                self._last_refill = time.monotonic()
            else:
                self._tokens -= 1.0

    async def __aenter__(self) -> TokenBucketRateLimiter:
        await self.acquire()
        return self

    async def __aexit__(self, *args: object) -> None:
        pass


class DualRateLimiter:
    """A read bucket for GET and a write bucket for every other method.

    Owned by a single client and shared by every request it issues.
    """

    def __init__(self, read: TokenBucketRateLimiter, write: TokenBucketRateLimiter) -> None:
        self.read = read
        self.write = write

    def for_method(self, method: str) -> TokenBucketRateLimiter:
        if method.upper() == READ_METHOD:
            return self.read
        return self.write

    async def acquire(self, method: str) -> None:
        """Wait for a token from the bucket that gates ``method``."""
        await self.for_method(method).acquire()
