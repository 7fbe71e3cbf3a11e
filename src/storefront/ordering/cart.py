"""Shopping cart line items."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from storefront.catalogue.item import Item


@dataclass(eq=False)
class CartItem:
    """A catalogue Item in a user's cart, with the price the user was shown.

    ``item`` is a shared reference, not a copy. ``price`` is locked in when the
    line is added and resynchronized by the cart reconciler.
    """

    item: Item
    price: Decimal

    @classmethod
    def for_item(cls, item: Item, today: date) -> "CartItem":
        """Create a line priced at the item's current effective price."""
        return cls(item=item, price=item.effective_price(today))
