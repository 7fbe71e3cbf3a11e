"""Persistence gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- PickleGateway, the default, writing files under STOREFRONT_DATA_DIR
- InMemoryGateway for development and testing

The adapter is chosen with the STOREFRONT_PERSISTENCE environment variable.
"""

import os

from storefront.persistence.port import PersistenceGateway

DEFAULT_RESOURCE_NAME = "users.dat"

_current_gateway: PersistenceGateway | None = None


def get_resource_name() -> str:
    """Name of the resource the user registry is stored under."""
    return os.environ.get("STOREFRONT_USERS_FILE", DEFAULT_RESOURCE_NAME)


def get_gateway() -> PersistenceGateway:
    """Return the configured persistence gateway (singleton)."""
    global _current_gateway
    if _current_gateway is None:
        adapter = os.environ.get("STOREFRONT_PERSISTENCE", "pickle")
        if adapter == "pickle":
            from storefront.persistence.pickle_adapter import PickleGateway

            _current_gateway = PickleGateway(os.environ.get("STOREFRONT_DATA_DIR"))
        elif adapter == "memory":
            from storefront.persistence.memory_adapter import InMemoryGateway

            _current_gateway = InMemoryGateway()
        else:
            raise ValueError(f"Unknown persistence adapter: {adapter}")
    return _current_gateway


def set_gateway(gateway: PersistenceGateway) -> None:
    """Override the active persistence gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to the configured default gateway."""
    global _current_gateway
    _current_gateway = None
