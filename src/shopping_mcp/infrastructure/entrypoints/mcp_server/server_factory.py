"""Builds the FastMCP server and registers the shopping tools.

The cart store and the search client are created here (or injected) once per
server and shared by every tool invocation through the handlers instance.
"""

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from shopping_mcp.core.application.ports import SearchPort
from shopping_mcp.core.domain.cart import CartStore
from shopping_mcp.infrastructure.configuration import Settings
from shopping_mcp.infrastructure.entrypoints.mcp_server.tool_handlers import (
    DEFAULT_NUM_RESULTS,
    ShoppingToolHandlers,
    ToolResponse,
)
from shopping_mcp.infrastructure.observability import get_logger
from shopping_mcp.infrastructure.tools.search.google import GoogleCustomSearchClient

logger = get_logger("server_factory")

SERVER_INSTRUCTIONS = (
    "Search a product catalog with search_products, then manage an in-memory "
    "cart with add_to_cart, remove_from_cart, view_cart and clear_cart. "
    "Use the Cart ID printed with each search result as item_id."
)


def _unwrap(response: ToolResponse) -> str:
    if response.is_error:
        raise ToolError(response.text)
    return response.text


def create_server(
    settings: Settings,
    cart_store: CartStore | None = None,
    search_port: SearchPort | None = None,
) -> FastMCP:
    handlers = ShoppingToolHandlers(
        cart_store=cart_store if cart_store is not None else CartStore(),
        search_port=search_port if search_port is not None else GoogleCustomSearchClient(settings.search),
        max_results=settings.search.max_results,
    )

    server = FastMCP(
        settings.server.name,
        instructions=SERVER_INSTRUCTIONS,
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.server.log_level.upper(),
    )

    @server.tool(
        name="search_products",
        description="Search products with the Google Custom Search API (default 10 results, at most 10).",
    )
    async def search_products(query: str, num_results: int | float = DEFAULT_NUM_RESULTS) -> str:
        return _unwrap(await handlers.search_products({"query": query, "num_results": num_results}))

    @server.tool(name="view_cart", description="Show the contents of the shopping cart.")
    def view_cart() -> str:
        return _unwrap(handlers.view_cart())

    @server.tool(
        name="add_to_cart",
        description=(
            "Add one unit of a product to the cart. item_id is the Cart ID from search_products; "
            "adding an item already in the cart increases its quantity."
        ),
    )
    def add_to_cart(
        item_id: str,
        title: str,
        link: str = "",
        price: str = "",
        shop: str = "",
        description: str = "",
    ) -> str:
        return _unwrap(
            handlers.add_to_cart(
                {
                    "item_id": item_id,
                    "title": title,
                    "link": link,
                    "price": price,
                    "shop": shop,
                    "description": description,
                }
            )
        )

    @server.tool(
        name="remove_from_cart",
        description="Remove one unit of a product from the cart; the item disappears when its quantity reaches zero.",
    )
    def remove_from_cart(item_id: str) -> str:
        return _unwrap(handlers.remove_from_cart({"item_id": item_id}))

    @server.tool(name="clear_cart", description="Remove every item from the cart.")
    def clear_cart() -> str:
        return _unwrap(handlers.clear_cart())

    logger.info("MCP server created", server_name=settings.server.name, tool_count=5)
    return server
