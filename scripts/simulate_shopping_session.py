"""Drive the shopping tools in-process with a canned search backend.

Usage: python scripts/simulate_shopping_session.py
"""

import asyncio
import os

from shopping_mcp.core.application.ports import SearchPort
from shopping_mcp.core.domain.catalog import AggregateOffer, CatalogResult, CatalogSearchPage
from shopping_mcp.infrastructure.configuration import Settings
from shopping_mcp.infrastructure.entrypoints.mcp_server import create_server
from shopping_mcp.infrastructure.observability import configure_logging


class CannedSearch(SearchPort):
    async def search(self, query: str, num_results: int) -> CatalogSearchPage:
        results = tuple(
            CatalogResult(
                title=f"{query.title()} #{index}",
                link=f"https://demo-shop.example/p/{index}",
                source="demo-shop.example",
                snippet=f"Demo listing for {query}",
                offers=(AggregateOffer(low_price=f"{9 + index}.99", currency="USD"),),
            )
            for index in range(1, num_results + 1)
        )
        return CatalogSearchPage(results=results, total_results=str(len(results)), search_time=0.01)


def _text(result) -> str:
    content = result[0] if isinstance(result, tuple) else result
    return "".join(block.text for block in content)


async def simulate() -> None:
    os.environ.setdefault("GOOGLE_API_KEY", "demo-key")
    os.environ.setdefault("GOOGLE_SEARCH_ENGINE_ID", "demo-cx")

    settings = Settings()
    configure_logging(settings.server.log_level)
    server = create_server(settings, search_port=CannedSearch())

    print("🚀 Simulating a shopping session...")
    print(_text(await server.call_tool("search_products", {"query": "kettle", "num_results": 2})))

    item_id = "demo-shop.example-https:--demo-shop.example-p-1"
    for _ in range(2):
        print(_text(await server.call_tool("add_to_cart", {"item_id": item_id, "title": "Kettle #1"})))
    print(_text(await server.call_tool("view_cart", {})))
    print(_text(await server.call_tool("remove_from_cart", {"item_id": item_id})))
    print(_text(await server.call_tool("clear_cart", {})))
    print("✅ Simulation finished.")


if __name__ == "__main__":
    asyncio.run(simulate())
