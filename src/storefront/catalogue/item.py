"""Catalogue shapes referenced by shopping carts.

Items are shared: every cart line that points at an Item holds the same
instance, so a change to its price or sale is seen by all of them.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class Sale:
    """A temporary price reduction on an Item, valid through ``end_date`` inclusive."""

    sale_price: Decimal
    end_date: date

    def is_active(self, today: date) -> bool:
        return not self.end_date < today

    def is_expired(self, today: date) -> bool:
        return self.end_date < today


@dataclass(eq=False)
class Item:
    """A product listed in the catalogue with a base price and an optional sale."""

    name: str
    price: Decimal
    sale: Sale | None = None

    def active_sale(self, today: date) -> Sale | None:
        """Return the sale if it is still running on ``today``."""
        if self.sale is not None and self.sale.is_active(today):
            return self.sale
        return None

    def effective_price(self, today: date) -> Decimal:
        sale = self.active_sale(today)
        return sale.sale_price if sale is not None else self.price
