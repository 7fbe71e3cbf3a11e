"""Shared BDD fixtures and step definitions for account behaviour."""

import pytest
from pytest_bdd import given, parsers, then

from storefront.identity.users import UserService


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def outcome():
    """Container for the result of the last When step."""
    return {"user": None, "matches": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a freshly seeded user registry", target_fixture="user_service")
def seeded_registry(registry):
    return UserService(registry)


@given("an empty user registry", target_fixture="user_service")
def empty_user_registry(empty_registry):
    return UserService(empty_registry)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.re(r"the registry holds (?P<count>\d+) users?"), converters={"count": int})
def registry_holds(user_service, count):
    assert len(user_service.get_users()) == count
