"""Exceptions raised by the storefront core."""


class StorefrontError(Exception):
    """Base class for storefront errors."""


class PersistenceError(StorefrontError):
    """The user registry could not be written to its resource."""

    def __init__(self, resource_name: str, reason: str):
        self.resource_name = resource_name
        self.reason = reason
        super().__init__(f"Could not save users to {resource_name}: {reason}")
