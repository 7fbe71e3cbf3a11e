from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)


TODAY = date(2024, 6, 15)


@pytest.fixture(autouse=True)
def run_around_tests(monkeypatch, tmp_path):
    """Isolate every test from process-wide gateway, service and environment state."""
    from storefront.bootstrap import reset_user_service
    from storefront.persistence import reset_gateway

    for var in ("STOREFRONT_USERS_FILE", "STOREFRONT_PERSISTENCE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))

    reset_gateway()
    reset_user_service()
    yield
    reset_gateway()
    reset_user_service()


@pytest.fixture()
def clock():
    from storefront.shared.clock import FixedClock

    return FixedClock(TODAY)


@pytest.fixture()
def gateway():
    from storefront.persistence.memory_adapter import InMemoryGateway

    return InMemoryGateway()


@pytest.fixture()
def registry(gateway, clock):
    """A registry initialized from an empty store, i.e. holding the seed accounts."""
    from storefront.identity.registry import UserRegistry

    registry = UserRegistry(gateway=gateway, clock=clock)
    registry.initialize()
    return registry


@pytest.fixture()
def empty_registry(gateway, clock):
    """A registry with no users, bypassing initialization."""
    from storefront.identity.registry import UserRegistry

    registry = UserRegistry(gateway=gateway, clock=clock)
    registry.initialized = True
    return registry


@pytest.fixture()
def service(registry):
    from storefront.identity.users import UserService

    return UserService(registry)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------
def _make_item(name="Widget", price="20.00", sale_price=None, sale_end=None):
    from storefront.catalogue.item import Item, Sale

    sale = None
    if sale_price is not None:
        sale = Sale(sale_price=Decimal(sale_price), end_date=sale_end or TODAY)
    return Item(name=name, price=Decimal(price), sale=sale)


def _make_user(user_id=0, username="shopper", account_type=None, active=True, cart=None, past_orders=None):
    from storefront.identity.user import AccountType, User

    return User(
        id=user_id,
        username=username,
        password="secret",
        email=f"{username}@example.com",
        account_type=account_type or AccountType.CUSTOMER,
        active=active,
        cart=cart,
        past_orders=past_orders or [],
    )


@pytest.fixture()
def make_item():
    return _make_item


@pytest.fixture()
def make_user():
    return _make_user
