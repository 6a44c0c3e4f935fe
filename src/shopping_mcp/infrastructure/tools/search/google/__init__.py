from shopping_mcp.infrastructure.tools.search.google.google_custom_search_client import (
    GoogleCustomSearchClient,
)

__all__ = ["GoogleCustomSearchClient"]
