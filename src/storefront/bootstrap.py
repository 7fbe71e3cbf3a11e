"""Composition root for the storefront core.

Builds the persistence gateway from configuration, initializes the user
registry once, and hands out the service wrapping it.
"""

import structlog

from storefront.identity.registry import UserRegistry
from storefront.identity.users import UserService
from storefront.persistence import get_gateway, get_resource_name
from storefront.persistence.port import PersistenceGateway
from storefront.shared.clock import Clock

logger = structlog.get_logger(__name__)

_user_service: UserService | None = None


def build_user_service(
    gateway: PersistenceGateway | None = None,
    resource_name: str | None = None,
    clock: Clock | None = None,
) -> UserService:
    """Create an initialized registry and the service over it."""
    registry = UserRegistry(
        gateway=gateway or get_gateway(),
        resource_name=resource_name or get_resource_name(),
        clock=clock,
    )
    registry.initialize()
    return UserService(registry)


def get_user_service() -> UserService:
    """Return the process-wide user service, initializing the registry on first use."""
    global _user_service
    if _user_service is None:
        logger.debug("Building user service")
        _user_service = build_user_service()
    return _user_service


def reset_user_service() -> None:
    """Forget the process-wide user service (useful for tests)."""
    global _user_service
    _user_service = None
