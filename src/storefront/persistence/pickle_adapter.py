"""Pickle-backed persistence adapter.

Stores the whole user list as a single pickled object graph in a file.
Object identity inside the graph is preserved, so cart lines that shared an
Item before saving share it again after loading.
"""

import os
import pickle
import tempfile
from pathlib import Path

import structlog

from storefront.identity.user import User
from storefront.persistence.port import PersistenceGateway

logger = structlog.get_logger(__name__)


class PickleGateway(PersistenceGateway):
    """Saves and loads users as pickle files under ``base_dir``."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    def path_for(self, resource_name: str) -> Path:
        return self.base_dir / resource_name

    def load(self, resource_name: str) -> list[User]:
        path = self.path_for(resource_name)
        logger.debug("Loading users", path=str(path))

        with path.open("rb") as fh:
            users = pickle.load(fh)

        if not isinstance(users, list) or not all(isinstance(u, User) for u in users):
            raise TypeError(f"{path} does not contain a list of users")

        logger.debug("Loaded users", path=str(path), count=len(users))
        return users

    def save(self, users: list[User], resource_name: str) -> None:
        path = self.path_for(resource_name)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as fh:
                pickle.dump(list(users), fh, protocol=pickle.HIGHEST_PROTOCOL)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Saved users", path=str(path), count=len(users))
