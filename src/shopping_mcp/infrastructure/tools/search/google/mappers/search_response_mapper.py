from shopping_mcp.core.domain.catalog import AggregateOffer, CatalogResult, CatalogSearchPage
from shopping_mcp.infrastructure.tools.search.google.dtos import SearchItemDto, SearchResponseDto


class SearchResponseMapper:
    """Maps the Google Custom Search payload onto catalog domain objects."""

    @staticmethod
    def to_result(item: SearchItemDto) -> CatalogResult:
        return CatalogResult(
            title=item.title,
            link=item.link,
            source=item.displayLink,
            snippet=item.snippet,
            product_names=tuple(product.name for product in item.pagemap.product),
            offers=tuple(
                AggregateOffer(
                    low_price=offer.lowprice,
                    high_price=offer.highprice,
                    currency=offer.pricecurrency,
                )
                for offer in item.pagemap.aggregateoffer
            ),
        )

    @classmethod
    def to_page(cls, response: SearchResponseDto) -> CatalogSearchPage:
        return CatalogSearchPage(
            results=tuple(cls.to_result(item) for item in response.items),
            total_results=response.searchInformation.totalResults,
            search_time=response.searchInformation.searchTime,
        )
