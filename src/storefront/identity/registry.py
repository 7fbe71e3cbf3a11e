"""The user registry: the in-memory source of truth for accounts.

A registry is created once per process by the composition root and
initialized exactly once. Initialization loads the saved users (or seeds the
default accounts when nothing usable is stored) and then brings cart prices
and order statuses up to date with the current date.
"""

from collections.abc import Iterator

import structlog

from storefront.identity.user import AccountType, User
from storefront.ordering.reconciliation import reconcile_cart_prices
from storefront.ordering.shipment import promote_shipped_orders
from storefront.persistence import DEFAULT_RESOURCE_NAME
from storefront.persistence.port import PersistenceGateway
from storefront.shared.clock import Clock, SystemClock
from storefront.shared.exceptions import PersistenceError

logger = structlog.get_logger(__name__)

# (username, password, email, account type, active)
SEED_ACCOUNTS = [
    ("DefaultUser", "DefaultPassword", "defaultUser@email.com", AccountType.CUSTOMER, True),
    ("DefaultManager", "DefaultPassword", "defaultManager@email.com", AccountType.MANAGER, True),
    ("admin", "123password@123", "admin@email.com", AccountType.ADMINISTRATOR, True),
    ("badUser", "pass", "bad@user.com", AccountType.CUSTOMER, False),
]


class UserRegistry:
    """Owns the list of users and the assignment of their ids."""

    def __init__(
        self,
        gateway: PersistenceGateway,
        resource_name: str = DEFAULT_RESOURCE_NAME,
        clock: Clock | None = None,
    ) -> None:
        self.gateway = gateway
        self.resource_name = resource_name
        self.clock = clock or SystemClock()
        self.users: list[User] = []
        self.initialized = False

    def __len__(self) -> int:
        return len(self.users)

    def __iter__(self) -> Iterator[User]:
        return iter(self.users)

    # -------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------
    def initialize(self) -> None:
        """Load or seed the users, then reconcile carts and ship due orders.

        Runs once; later calls do nothing.
        """
        if self.initialized:
            logger.debug("User registry already initialized", resource=self.resource_name)
            return

        self.users = self._load()
        if not self.users:
            self._seed()

        today = self.clock.today()
        reconcile_cart_prices(self.users, today)
        promote_shipped_orders(self.users, today)

        self.initialized = True
        logger.info("User registry initialized", resource=self.resource_name, users=len(self.users))

    def _load(self) -> list[User]:
        logger.debug("Loading user registry", resource=self.resource_name)
        try:
            users = self.gateway.load(self.resource_name)
        except FileNotFoundError:
            logger.warning("User registry resource was not found", resource=self.resource_name)
            return []
        except Exception as exc:
            logger.warning(
                "User registry could not be loaded",
                resource=self.resource_name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return []
        return list(users) if users else []

    def _seed(self) -> None:
        for username, password, email, account_type, active in SEED_ACCOUNTS:
            self.add(
                User(
                    id=self.next_id(),
                    username=username,
                    password=password,
                    email=email,
                    account_type=account_type,
                    active=active,
                )
            )
        logger.debug("Seeded default users", users=[u.username for u in self.users])

    # -------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------
    def next_id(self) -> int:
        """The id the next created user receives: the current registry size."""
        return len(self.users)

    def add(self, user: User) -> User:
        self.users.append(user)
        return user

    # -------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------
    def save(self) -> None:
        """Hand the users to the gateway. Failures surface as PersistenceError."""
        try:
            self.gateway.save(self.users, self.resource_name)
        except Exception as exc:
            logger.error(
                "User registry could not be saved",
                resource=self.resource_name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise PersistenceError(self.resource_name, str(exc)) from exc
        logger.info("User registry saved", resource=self.resource_name, users=len(self.users))
