"""User accounts held by the registry."""

from dataclasses import dataclass, field
from enum import Enum

from storefront.ordering.cart import CartItem
from storefront.ordering.order import Order


class AccountType(Enum):
    """Enumeration of account roles."""

    CUSTOMER = "Customer"
    MANAGER = "Manager"
    ADMINISTRATOR = "Administrator"


@dataclass(eq=False)
class User:
    """A storefront account.

    ``id`` is assigned by the registry when the user is created and never
    changes. ``cart`` may be ``None`` for accounts that never started one.
    The password is an opaque string; it is compared verbatim and kept out of
    ``repr`` so it does not leak into logs.
    """

    id: int
    username: str
    password: str = field(repr=False)
    email: str
    account_type: AccountType
    active: bool = True
    cart: list[CartItem] | None = field(default_factory=list)
    past_orders: list[Order] = field(default_factory=list)

    def has_credentials(self, username: str, password: str) -> bool:
        return self.username == username and self.password == password
