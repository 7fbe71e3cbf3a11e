"""Placed orders and their shipment status."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from storefront.ordering.cart import CartItem


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    ORDERED = "Ordered"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------
@dataclass(eq=False)
class Order:
    """An order in a user's history.

    An ORDERED order ships on ``ship_date``; the shipment promoter moves it to
    SHIPPED once that date has arrived. ``items`` are the lines bought, at the
    prices paid; cart reconciliation never reprices them.
    """

    ship_date: date
    status: OrderStatus = OrderStatus.ORDERED
    items: list[CartItem] = field(default_factory=list)

    def is_due_for_shipment(self, today: date) -> bool:
        return self.status == OrderStatus.ORDERED and self.ship_date <= today

    def mark_shipped(self) -> None:
        if self.status != OrderStatus.ORDERED:
            raise ValueError(f"Only ordered orders can be shipped, not {self.status.value}")
        self.status = OrderStatus.SHIPPED
