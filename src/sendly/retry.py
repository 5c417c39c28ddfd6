"""Bounded retry with exponential backoff for Sendly API calls."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from .errors import RateLimitError, SendlyError
from .logging import build_attempt_log, log_attempt
from .transport import OutboundRequest

T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]


def backoff_delay(attempt: int) -> float:
    """Delay before ``attempt`` (1-based retries): 1s, 2s, 4s, ..."""
    return float(2 ** (attempt - 1))


def next_delay(attempt: int, last_error: Optional[SendlyError]) -> float:
    if isinstance(last_error, RateLimitError) and last_error.retry_after is not None:
        return last_error.retry_after
    return backoff_delay(attempt)


class RetryController:
    def __init__(self, max_retries: int, *, sleep: Optional[SleepFunc] = None) -> None:
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._max_retries = max_retries
        self._sleep = sleep or asyncio.sleep

    @property
    def max_retries(self) -> int:
        return self._max_retries

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        request: Optional[OutboundRequest] = None,
    ) -> T:
        """Run ``operation`` until it succeeds, fails terminally, or attempts run out.

        Non-retryable errors propagate on first occurrence. Cancellation is not
        intercepted: ``asyncio.CancelledError`` escapes from either the sleep or
        the in-flight call.
        """
        max_attempts = self._max_retries + 1
        last_error: Optional[SendlyError] = None
        for attempt in range(max_attempts):
            if attempt > 0:
                delay = next_delay(attempt, last_error)
                log_attempt(build_attempt_log(request, attempt - 1, max_attempts, last_error, delay))
                await self._sleep(delay)
            try:
                return await operation()
            except SendlyError as exc:
                if not exc.retryable:
                    raise
                last_error = exc

        if last_error is None:
            raise SendlyError("Request failed after retries")
        log_attempt(build_attempt_log(request, max_attempts - 1, max_attempts, last_error), logging.ERROR)
        raise last_error


__all__ = ["RetryController", "SleepFunc", "backoff_delay", "next_delay"]
