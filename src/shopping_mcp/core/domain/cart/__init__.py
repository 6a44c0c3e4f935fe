from shopping_mcp.core.domain.cart.cart_line_item import CartLineItem
from shopping_mcp.core.domain.cart.cart_store import CartStore
from shopping_mcp.core.domain.cart.read_write_lock import ReadWriteLock

__all__ = ["CartLineItem", "CartStore", "ReadWriteLock"]
