from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from shopping_mcp.core.exceptions import ProviderError

_T = TypeVar("_T")


def _retryable(exc: BaseException) -> bool:
    return isinstance(exc, ProviderError) and exc.retryable


@dataclass(frozen=True)
class RetryPolicy:
    """Re-runs a coroutine factory while it fails with a retryable ProviderError."""

    max_attempts: int = 1  # 1 attempt means no retries
    initial_wait: float = 0.25
    max_wait: float = 5.0

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        # fn is called once per attempt so every attempt gets a fresh awaitable.
        async for attempt in self._retrying():
            with attempt:
                return await fn()
        raise RuntimeError("retry loop ended without an attempt")

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential_jitter(initial=self.initial_wait, max=self.max_wait),
            reraise=True,
        )
