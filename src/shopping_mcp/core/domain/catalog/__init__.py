from shopping_mcp.core.domain.catalog.catalog_result import (
    AggregateOffer,
    CatalogResult,
    CatalogSearchPage,
)

__all__ = ["AggregateOffer", "CatalogResult", "CatalogSearchPage"]
