"""Account lookup, creation and search over the user registry."""

from collections.abc import Sequence

import structlog

from storefront.identity.registry import UserRegistry
from storefront.identity.user import AccountType, User

logger = structlog.get_logger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class UserService:
    """Reads and mutates the registry on behalf of in-process callers.

    Invalid input is reported by returning ``None`` (lookups and creation) or an
    empty list (search), never by raising.
    """

    def __init__(self, registry: UserRegistry) -> None:
        self.registry = registry

    def get_users(self) -> list[User]:
        """Return the live list of users; later changes to the registry show up in it."""
        return self.registry.users

    def get_user(self, username: str | None, password: str | None) -> User | None:
        """Return the first user whose username and password both match exactly."""
        if _is_blank(username) or _is_blank(password):
            logger.warning("Lookup rejected: username and/or password is missing")
            return None

        for user in self.registry:
            if user.has_credentials(username, password):
                logger.debug("User found", user_id=user.id, username=username)
                return user

        logger.debug("No user matches the given credentials", username=username)
        return None

    def create_user(
        self,
        username: str | None,
        password: str | None,
        email: str | None,
        account_type: AccountType | None,
    ) -> User | None:
        """Create and register a new active user.

        Returns ``None`` without touching the registry if any field is missing
        or blank. Each successful call creates a new user with a new id, even
        for identical arguments.
        """
        if _is_blank(username) or _is_blank(password) or _is_blank(email) or account_type is None:
            logger.warning(
                "User creation rejected: missing field",
                username=username,
                email=email,
                account_type=account_type.value if account_type else None,
            )
            return None

        user = self.registry.add(
            User(
                id=self.registry.next_id(),
                username=username,
                password=password,
                email=email,
                account_type=account_type,
                active=True,
            )
        )
        logger.info("User created", user_id=user.id, username=username, account_type=account_type.value)
        return user

    def find_users_by_name(
        self,
        search_string: str | None,
        account_type: AccountType | None,
        active: bool,
    ) -> Sequence[User]:
        """Return users whose username contains ``search_string`` and whose type and status match."""
        if search_string is None or account_type is None:
            return []

        matches = [
            user
            for user in self.registry
            if search_string in user.username and user.account_type == account_type and user.active == active
        ]
        logger.debug(
            "User search",
            search_string=search_string,
            account_type=account_type.value,
            active=active,
            matches=len(matches),
        )
        return matches

    def write_to_file(self) -> None:
        """Save the registry. Raises PersistenceError if it cannot be stored."""
        self.registry.save()
