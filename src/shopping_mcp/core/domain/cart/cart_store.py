"""In-memory shopping cart shared by all tool invocations of one server."""

from __future__ import annotations

from shopping_mcp.core.domain.cart.cart_line_item import CartLineItem
from shopping_mcp.core.domain.cart.read_write_lock import ReadWriteLock


class CartStore:
    """Concurrency-safe mapping of item identifier to line item.

    Mutations (``add``, ``remove``, ``clear``) hold the exclusive lock; reads
    hold the shared lock and only ever return copies, so callers can never
    change stored state except through these methods.
    """

    def __init__(self) -> None:
        self._items: dict[str, CartLineItem] = {}
        self._lock = ReadWriteLock()

    def add(
        self,
        item_id: str,
        title: str,
        link: str,
        price: str,
        shop: str,
        description: str,
    ) -> int:
        """Add one unit of ``item_id`` and return its resulting quantity.

        Metadata is taken from the first add only; later adds for the same
        identifier just bump the quantity.
        """
        return self.add_one(item_id, title, link, price, shop, description).quantity

    def add_one(
        self,
        item_id: str,
        title: str,
        link: str,
        price: str,
        shop: str,
        description: str,
    ) -> CartLineItem:
        """Same as ``add`` but returns a copy of the line item as this add left it."""
        with self._lock.write_locked():
            existing = self._items.get(item_id)
            if existing is None:
                existing = CartLineItem(
                    item_id=item_id,
                    title=title,
                    link=link,
                    price=price,
                    shop=shop,
                    description=description,
                    quantity=0,
                )
                self._items[item_id] = existing
            existing.quantity += 1
            return existing.copy()

    def remove(self, item_id: str) -> bool:
        """Remove one unit of ``item_id``. Returns False if it was not in the cart."""
        removed, _ = self.remove_one(item_id)
        return removed

    def remove_one(self, item_id: str) -> tuple[bool, CartLineItem | None]:
        """Remove one unit and report what this removal left behind.

        Returns ``(False, None)`` when the item was absent, ``(True, None)``
        when the entry was deleted and ``(True, item)`` with a copy of the
        decremented line item otherwise.
        """
        with self._lock.write_locked():
            existing = self._items.get(item_id)
            if existing is None:
                return False, None
            if existing.quantity > 1:
                existing.quantity -= 1
                return True, existing.copy()
            del self._items[item_id]
            return True, None

    def get(self, item_id: str) -> CartLineItem | None:
        with self._lock.read_locked():
            existing = self._items.get(item_id)
            return existing.copy() if existing is not None else None

    def list_items(self) -> dict[str, CartLineItem]:
        with self._lock.read_locked():
            return {item_id: item.copy() for item_id, item in self._items.items()}

    def clear(self) -> None:
        with self._lock.write_locked():
            self._items = {}

    def total_quantity(self) -> int:
        with self._lock.read_locked():
            return sum(item.quantity for item in self._items.values())

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._items)
