from dataclasses import dataclass, replace


@dataclass
class CartLineItem:
    """A cart entry: one identifier, its display metadata and a quantity."""

    item_id: str
    title: str
    link: str
    price: str
    shop: str
    description: str
    quantity: int = 1

    def copy(self) -> "CartLineItem":
        return replace(self)
