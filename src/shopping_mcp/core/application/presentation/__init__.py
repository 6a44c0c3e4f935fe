from shopping_mcp.core.application.presentation.shopping_formatter import (
    EMPTY_CART_TEXT,
    format_added,
    format_cart,
    format_cleared,
    format_not_in_cart,
    format_removed,
    format_search_results,
)

__all__ = [
    "EMPTY_CART_TEXT",
    "format_added",
    "format_cart",
    "format_cleared",
    "format_not_in_cart",
    "format_removed",
    "format_search_results",
]
