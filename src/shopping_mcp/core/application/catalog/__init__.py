from shopping_mcp.core.application.catalog.item_id_generator import generate_item_id
from shopping_mcp.core.application.catalog.result_normalizer import (
    PRICE_NOT_SPECIFIED,
    NormalizedResult,
    format_price,
    normalize_result,
    normalize_results,
)

__all__ = [
    "PRICE_NOT_SPECIFIED",
    "NormalizedResult",
    "format_price",
    "generate_item_id",
    "normalize_result",
    "normalize_results",
]
