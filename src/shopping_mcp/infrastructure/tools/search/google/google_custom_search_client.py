"""Product search backed by the Google Custom Search JSON API."""

import time

import httpx
from pydantic import ValidationError

from shopping_mcp.core.application.ports import SearchPort
from shopping_mcp.core.domain.catalog import CatalogSearchPage
from shopping_mcp.core.exceptions import ProviderError
from shopping_mcp.infrastructure.common.retry import RetryPolicy
from shopping_mcp.infrastructure.configuration import GoogleSearchSettings
from shopping_mcp.infrastructure.observability import get_logger, redact_text, trace_operation
from shopping_mcp.infrastructure.observability.metrics_service import (
    SEARCH_LATENCY_SECONDS,
    SEARCH_REQUESTS_TOTAL,
)
from shopping_mcp.infrastructure.tools.search.google.dtos import SearchResponseDto
from shopping_mcp.infrastructure.tools.search.google.mappers import SearchResponseMapper

logger = get_logger("google_custom_search_client")

_PROVIDER = "GoogleCustomSearch"
_BODY_PREVIEW_CHARS = 500


class GoogleCustomSearchClient(SearchPort):
    """Issues one GET per search; no state is shared between calls."""

    def __init__(self, settings: GoogleSearchSettings, retry_policy: RetryPolicy | None = None) -> None:
        self._settings = settings
        self._retry_policy = retry_policy or RetryPolicy(max_attempts=settings.max_attempts)

    @trace_operation("search.google_custom_search")
    async def search(self, query: str, num_results: int) -> CatalogSearchPage:
        self._settings.validate_credentials()
        num = max(1, min(num_results, self._settings.max_results))

        logger.info("Product search requested", query=query, num_results=num, source_system=_PROVIDER)
        started = time.perf_counter()
        try:
            page = await self._retry_policy.run(lambda: self._fetch(query, num))
        except ProviderError as exc:
            SEARCH_REQUESTS_TOTAL.labels(outcome="error").inc()
            logger.error(
                "Product search failed",
                error_type=type(exc).__name__,
                error_details=exc.message,
                error_retryable=exc.retryable,
                status_code=exc.status_code,
                source_system=_PROVIDER,
            )
            raise

        elapsed = time.perf_counter() - started
        SEARCH_LATENCY_SECONDS.observe(elapsed)
        SEARCH_REQUESTS_TOTAL.labels(outcome="success").inc()
        logger.info(
            "Product search completed",
            result_count=len(page),
            duration_ms=round(elapsed * 1000, 1),
            source_system=_PROVIDER,
        )
        return page

    def _params(self, query: str, num: int) -> dict[str, str]:
        api_key = self._settings.api_key.get_secret_value() if self._settings.api_key else ""
        return {
            "key": api_key,
            "cx": self._settings.search_engine_id,
            "q": query,
            "num": str(num),
        }

    async def _fetch(self, query: str, num: int) -> CatalogSearchPage:
        try:
            async with httpx.AsyncClient(timeout=self._settings.timeout_seconds) as client:
                response = await client.get(self._settings.base_url, params=self._params(query, num))
        except httpx.HTTPError as exc:
            raise ProviderError(
                provider=_PROVIDER,
                message=f"failed to make search request: {redact_text(str(exc))}",
                retryable=True,
            ) from exc

        if response.status_code != httpx.codes.OK:
            status = response.status_code
            body = redact_text(response.text[:_BODY_PREVIEW_CHARS])
            raise ProviderError(
                provider=_PROVIDER,
                message=f"search API returned status {status}: {body}",
                retryable=status == httpx.codes.TOO_MANY_REQUESTS or status >= 500,
                status_code=status,
            )

        return self._decode(response.content)

    @staticmethod
    def _decode(content: bytes) -> CatalogSearchPage:
        try:
            dto = SearchResponseDto.model_validate_json(content)
        except ValidationError as exc:
            first = exc.errors()[0] if exc.errors() else {"msg": str(exc)}
            raise ProviderError(
                provider=_PROVIDER,
                message=f"failed to decode search response: {first['msg']}",
            ) from exc
        return SearchResponseMapper.to_page(dto)
