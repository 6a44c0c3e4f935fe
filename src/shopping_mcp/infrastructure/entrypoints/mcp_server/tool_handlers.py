"""Transport-free handlers behind the MCP tools.

Each handler takes the raw argument mapping of one tool invocation and returns
a ToolResponse. Expected failures (bad arguments, search errors) become error
responses; nothing here terminates the process.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from shopping_mcp.core.application.catalog import PRICE_NOT_SPECIFIED, normalize_results
from shopping_mcp.core.application.ports import SearchPort
from shopping_mcp.core.application.presentation import (
    format_added,
    format_cart,
    format_cleared,
    format_not_in_cart,
    format_removed,
    format_search_results,
)
from shopping_mcp.core.domain.cart import CartStore
from shopping_mcp.core.exceptions import ShoppingError, ToolArgumentError
from shopping_mcp.infrastructure.entrypoints.mcp_server.tool_arguments import (
    bounded_int,
    ensure_arguments,
    optional_string,
    require_string,
)
from shopping_mcp.infrastructure.observability import get_logger, trace_operation
from shopping_mcp.infrastructure.observability.metrics_service import (
    CART_UNIQUE_ITEMS,
    TOOL_CALLS_TOTAL,
)

logger = get_logger("tool_handlers")

DEFAULT_NUM_RESULTS = 10


@dataclass(frozen=True)
class ToolResponse:
    text: str
    is_error: bool = False


def _record(tool: str, response: ToolResponse) -> ToolResponse:
    outcome = "error" if response.is_error else "success"
    TOOL_CALLS_TOTAL.labels(tool=tool, outcome=outcome).inc()
    logger.info("Tool completed", tool_name=tool, processing_status=outcome.upper())
    return response


class ShoppingToolHandlers:
    def __init__(
        self,
        cart_store: CartStore,
        search_port: SearchPort,
        max_results: int = DEFAULT_NUM_RESULTS,
    ) -> None:
        self._cart = cart_store
        self._search = search_port
        self._max_results = max_results

    @trace_operation("tool.search_products")
    async def search_products(self, arguments: Mapping[str, Any] | None) -> ToolResponse:
        try:
            args = ensure_arguments(arguments)
            query = require_string(args, "query")
            num_results = bounded_int(
                args,
                "num_results",
                default=DEFAULT_NUM_RESULTS,
                maximum=self._max_results,
            )
        except ToolArgumentError as exc:
            return _record("search_products", ToolResponse(str(exc), is_error=True))

        try:
            page = await self._search.search(query, num_results)
        except ShoppingError as exc:
            return _record("search_products", ToolResponse(f"Search failed: {exc}", is_error=True))

        items = normalize_results(page.results)
        return _record("search_products", ToolResponse(format_search_results(query, page, items)))

    @trace_operation("tool.view_cart")
    def view_cart(self, arguments: Mapping[str, Any] | None = None) -> ToolResponse:  # noqa: ARG002
        return _record("view_cart", ToolResponse(format_cart(self._cart.list_items())))

    @trace_operation("tool.add_to_cart")
    def add_to_cart(self, arguments: Mapping[str, Any] | None) -> ToolResponse:
        try:
            args = ensure_arguments(arguments)
            item_id = require_string(args, "item_id")
            title = require_string(args, "title")
        except ToolArgumentError as exc:
            return _record("add_to_cart", ToolResponse(str(exc), is_error=True))

        price = optional_string(args, "price") or PRICE_NOT_SPECIFIED
        # Metadata is first-write-wins, so the returned line shows what the cart holds.
        line = self._cart.add_one(
            item_id=item_id,
            title=title,
            link=optional_string(args, "link"),
            price=price,
            shop=optional_string(args, "shop"),
            description=optional_string(args, "description"),
        )
        CART_UNIQUE_ITEMS.set(len(self._cart))
        logger.debug("Cart item added", item_id=item_id, quantity=line.quantity)
        return _record("add_to_cart", ToolResponse(format_added(item_id, line.title, line.quantity)))

    @trace_operation("tool.remove_from_cart")
    def remove_from_cart(self, arguments: Mapping[str, Any] | None) -> ToolResponse:
        try:
            item_id = require_string(ensure_arguments(arguments), "item_id")
        except ToolArgumentError as exc:
            return _record("remove_from_cart", ToolResponse(str(exc), is_error=True))

        removed, remaining = self._cart.remove_one(item_id)
        if not removed:
            return _record("remove_from_cart", ToolResponse(format_not_in_cart(item_id)))

        CART_UNIQUE_ITEMS.set(len(self._cart))
        logger.debug("Cart item removed", item_id=item_id)
        return _record("remove_from_cart", ToolResponse(format_removed(item_id, remaining)))

    @trace_operation("tool.clear_cart")
    def clear_cart(self, arguments: Mapping[str, Any] | None = None) -> ToolResponse:  # noqa: ARG002
        self._cart.clear()
        CART_UNIQUE_ITEMS.set(0)
        logger.debug("Cart cleared")
        return _record("clear_cart", ToolResponse(format_cleared()))
