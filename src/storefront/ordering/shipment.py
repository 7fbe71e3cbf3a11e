"""Order shipment promotion.

There is no scheduler: orders move from ORDERED to SHIPPED when the registry
is initialized on or after their ship date.
"""

from collections.abc import Iterable
from datetime import date

import structlog

from storefront.identity.user import User

logger = structlog.get_logger(__name__)


def promote_shipped_orders(users: Iterable[User], today: date) -> int:
    """Mark every ORDERED order whose ship date is on or before ``today`` as SHIPPED.

    Returns the number of orders promoted.
    """
    promoted = 0
    for user in users:
        for order in user.past_orders:
            if order.is_due_for_shipment(today):
                order.mark_shipped()
                promoted += 1

    if promoted:
        logger.info("Orders marked as shipped", promoted=promoted, as_of=today.isoformat())
    return promoted
