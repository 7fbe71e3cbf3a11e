"""In-memory persistence adapter for development and testing.

Keeps saved user lists in a dictionary keyed by resource name. It can be
configured at runtime to fail on load or save, which lets tests exercise the
registry's recovery and error paths without touching the filesystem.
"""

from storefront.identity.user import User
from storefront.persistence.port import PersistenceGateway


class InMemoryGateway(PersistenceGateway):
    """Configurable dictionary-backed gateway."""

    def __init__(self) -> None:
        self.resources: dict[str, list[User]] = {}
        self.fail_on_load: bool = False
        self.fail_on_save: bool = False
        self.failure_reason: str = "Storage unavailable"
        self.calls: list[dict] = []

    def configure(
        self,
        fail_on_load: bool = False,
        fail_on_save: bool = False,
        failure_reason: str = "Storage unavailable",
    ) -> None:
        """Configure gateway behavior at runtime."""
        self.fail_on_load = fail_on_load
        self.fail_on_save = fail_on_save
        self.failure_reason = failure_reason

    def load(self, resource_name: str) -> list[User]:
        self.calls.append({"method": "load", "resource_name": resource_name})

        if self.fail_on_load:
            raise OSError(self.failure_reason)
        if resource_name not in self.resources:
            raise FileNotFoundError(resource_name)
        return self.resources[resource_name]

    def save(self, users: list[User], resource_name: str) -> None:
        self.calls.append({"method": "save", "resource_name": resource_name, "count": len(users)})

        if self.fail_on_save:
            raise OSError(self.failure_reason)
        self.resources[resource_name] = list(users)
