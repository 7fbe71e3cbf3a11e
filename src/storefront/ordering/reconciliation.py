"""Cart price reconciliation.

Items and their sales change between sessions, while cart lines keep the price
the user last saw. Reconciliation brings every line back in line with its
item: the sale price while a sale is running, the base price otherwise.
Expired sales are removed from the item itself, which every cart referencing
that item observes.
"""

from collections.abc import Iterable
from datetime import date

import structlog

from storefront.identity.user import User
from storefront.ordering.cart import CartItem

logger = structlog.get_logger(__name__)


def _clear_expired_sale(line: CartItem, today: date) -> None:
    item = line.item
    if item.sale is not None and item.sale.is_expired(today):
        logger.debug(
            "Clearing expired sale",
            item=item.name,
            sale_price=str(item.sale.sale_price),
            end_date=item.sale.end_date.isoformat(),
        )
        item.sale = None


def reconcile_cart_prices(users: Iterable[User], today: date) -> int:
    """Resynchronize cart line prices with their items.

    Returns the number of cart lines whose price changed. Running it again on
    a converged registry changes nothing and returns 0.
    """
    updated = 0
    for user in users:
        if user.cart is None:
            continue

        for line in user.cart:
            _clear_expired_sale(line, today)

            sale = line.item.active_sale(today)
            target = sale.sale_price if sale is not None else line.item.price
            if line.price == target:
                continue

            logger.debug(
                "Repricing cart line",
                username=user.username,
                item=line.item.name,
                previous_price=str(line.price),
                new_price=str(target),
                on_sale=sale is not None,
            )
            line.price = target
            updated += 1

    if updated:
        logger.info("Cart prices reconciled", updated_lines=updated)
    return updated
