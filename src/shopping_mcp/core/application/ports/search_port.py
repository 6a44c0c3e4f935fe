from abc import ABC, abstractmethod

from shopping_mcp.core.domain.catalog import CatalogSearchPage


class SearchPort(ABC):
    """Contract for the remote product-search collaborator."""

    @abstractmethod
    async def search(self, query: str, num_results: int) -> CatalogSearchPage:
        """Return the ordered results for ``query``.

        Raises ConfigurationError when credentials are missing and
        ProviderError for transport, status or decoding failures.
        """
