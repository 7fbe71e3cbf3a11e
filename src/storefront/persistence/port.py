"""Persistence port: abstract interface for storing the user registry.

The registry programs against this port; adapters are swapped via
configuration. The stored format is private to each adapter.
"""

from abc import ABC, abstractmethod

from storefront.identity.user import User


class PersistenceGateway(ABC):
    """Abstract interface for user persistence adapters."""

    @abstractmethod
    def load(self, resource_name: str) -> list[User]:
        """Return the users previously saved under ``resource_name``.

        Raises:
            FileNotFoundError: nothing has been saved under that name.
            Exception: any other failure to read or decode the stored users.
        """
        ...

    @abstractmethod
    def save(self, users: list[User], resource_name: str) -> None:
        """Durably store ``users`` under ``resource_name``, replacing what was there.

        Raises:
            Exception: the users could not be stored.
        """
        ...
