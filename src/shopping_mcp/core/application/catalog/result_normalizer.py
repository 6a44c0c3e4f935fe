from dataclasses import dataclass

from shopping_mcp.core.application.catalog.item_id_generator import generate_item_id
from shopping_mcp.core.domain.catalog import CatalogResult

PRICE_NOT_SPECIFIED = "price not specified"


@dataclass(frozen=True)
class NormalizedResult:
    """Display-ready view of a catalog result, shaped like a cart line item."""

    item_id: str
    title: str
    shop: str
    price: str
    link: str
    snippet: str


def format_price(result: CatalogResult) -> str:
    """Render the first advertised offer, or the placeholder when none has a low price."""
    if result.offers:
        offer = result.offers[0]
        if offer.low_price:
            return f"from {offer.low_price} {offer.currency}"
    return PRICE_NOT_SPECIFIED


def normalize_result(result: CatalogResult) -> NormalizedResult:
    return NormalizedResult(
        item_id=generate_item_id(result.source, result.link),
        title=result.title,
        shop=result.source,
        price=format_price(result),
        link=result.link,
        snippet=result.snippet,
    )


def normalize_results(results: tuple[CatalogResult, ...] | list[CatalogResult]) -> list[NormalizedResult]:
    return [normalize_result(result) for result in results]
