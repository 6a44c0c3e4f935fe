"""Plain-text rendering of search results and cart contents for the calling agent."""

from collections.abc import Mapping, Sequence

from shopping_mcp.core.application.catalog import NormalizedResult
from shopping_mcp.core.domain.cart import CartLineItem
from shopping_mcp.core.domain.catalog import CatalogSearchPage

EMPTY_CART_TEXT = "🛒 Cart is empty"
_SEPARATOR = "---"


def _render_result(ordinal: int, item: NormalizedResult) -> str:
    return "\n".join(
        [
            f"📦 Product #{ordinal}",
            f"🏷️ Title: {item.title}",
            f"🏪 Shop: {item.shop}",
            f"💰 Price: {item.price}",
            f"🔗 Link: {item.link}",
            f"📝 Description: {item.snippet}",
            f"🆔 Cart ID: {item.item_id}",
            _SEPARATOR,
        ]
    )


def format_search_results(
    query: str,
    page: CatalogSearchPage,
    items: Sequence[NormalizedResult],
) -> str:
    blocks = "\n".join(_render_result(index, item) for index, item in enumerate(items, start=1))
    return (
        f'🔍 Search results for "{query}"\n'
        f"📊 Found: {page.total_results} results in {page.search_time:.2f} seconds\n"
        f"📋 Showing the first {len(items)} results:\n"
        f"\n{blocks}\n\n"
        "💡 Use add_to_cart with the item's Cart ID to add it to the cart"
    )


def _render_line_item(item: CartLineItem) -> str:
    return "\n".join(
        [
            f"📦 {item.title}",
            f"🏪 Shop: {item.shop}",
            f"💰 Price: {item.price}",
            f"🔢 Quantity: {item.quantity}",
            f"🔗 Link: {item.link}",
            f"🆔 ID: {item.item_id}",
            _SEPARATOR,
        ]
    )


def format_cart(snapshot: Mapping[str, CartLineItem]) -> str:
    if not snapshot:
        return EMPTY_CART_TEXT

    total_items = sum(item.quantity for item in snapshot.values())
    blocks = "\n".join(_render_line_item(snapshot[item_id]) for item_id in sorted(snapshot))
    return (
        "🛒 Your cart\n"
        f"📊 Total items: {total_items} (unique: {len(snapshot)})\n"
        f"\n{blocks}\n\n"
        "💡 Use remove_from_cart with the item's ID to remove it"
    )


def format_added(item_id: str, title: str, quantity: int) -> str:
    return f"✅ Added to cart: {title}\n🔢 Quantity: {quantity}\n🆔 ID: {item_id}"


def format_removed(item_id: str, remaining: CartLineItem | None) -> str:
    if remaining is None:
        return f"🗑️ Removed from cart: {item_id}"
    return f"➖ Removed one unit of {item_id}\n🔢 Quantity left: {remaining.quantity}"


def format_not_in_cart(item_id: str) -> str:
    return f"⚠️ Item not found in cart: {item_id}"


def format_cleared() -> str:
    return "🧹 Cart cleared"
