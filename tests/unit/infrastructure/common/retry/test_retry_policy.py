"""Unit tests: RetryPolicy (tenacity wrapper)."""

from unittest.mock import AsyncMock

import pytest

from shopping_mcp.core.exceptions import ProviderError
from shopping_mcp.infrastructure.common.retry import RetryPolicy


def _fast(max_attempts: int) -> RetryPolicy:
    return RetryPolicy(max_attempts=max_attempts, initial_wait=0, max_wait=0)


def _transient() -> ProviderError:
    return ProviderError(provider="Test", message="busy", retryable=True)


class TestRetryPolicy:
    async def test_returns_value_on_first_success(self) -> None:
        fn = AsyncMock(return_value="ok")

        assert await _fast(3).run(fn) == "ok"
        fn.assert_awaited_once()

    async def test_default_policy_does_not_retry(self) -> None:
        fn = AsyncMock(side_effect=_transient())

        with pytest.raises(ProviderError, match="busy"):
            await RetryPolicy().run(fn)

        assert fn.await_count == 1

    async def test_retries_retryable_errors(self) -> None:
        fn = AsyncMock(side_effect=[_transient(), _transient(), "ok"])

        assert await _fast(3).run(fn) == "ok"
        assert fn.await_count == 3

    async def test_gives_up_after_max_attempts(self) -> None:
        fn = AsyncMock(side_effect=_transient())

        with pytest.raises(ProviderError):
            await _fast(2).run(fn)

        assert fn.await_count == 2

    async def test_non_retryable_provider_error_propagates_immediately(self) -> None:
        fn = AsyncMock(side_effect=ProviderError(provider="Test", message="bad request"))

        with pytest.raises(ProviderError, match="bad request"):
            await _fast(5).run(fn)

        assert fn.await_count == 1

    async def test_other_exceptions_are_not_retried(self) -> None:
        fn = AsyncMock(side_effect=ValueError("boom"))

        with pytest.raises(ValueError):
            await _fast(5).run(fn)

        assert fn.await_count == 1

    async def test_plain_callable_returning_coroutine_is_awaited(self) -> None:
        async def fetch() -> str:
            return "page"

        assert await _fast(1).run(lambda: fetch()) == "page"

    async def test_plain_callable_is_retried_with_fresh_coroutine(self) -> None:
        calls: list[int] = []

        async def fetch() -> str:
            calls.append(1)
            if len(calls) < 2:
                raise _transient()
            return "page"

        assert await _fast(3).run(lambda: fetch()) == "page"
        assert len(calls) == 2
