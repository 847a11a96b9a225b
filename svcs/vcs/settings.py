"""Persisted username for commit authorship."""

from __future__ import annotations

import logging

from svcs.vcs.fs import atomic_write_text
from svcs.vcs.history import is_single_line
from svcs.vcs.repo import InvalidUsernameError, Repository

logger = logging.getLogger(__name__)


class UserConfig:
    """Raw username string stored in ``config.txt``."""

    def __init__(self, repo: Repository) -> None:
        self.repo = repo

    def get(self) -> str | None:
        """Return the username, or *None* if none has been set."""
        path = self.repo.config_file
        if not path.is_file():
            return None
        username = path.read_text(encoding="utf-8")
        return username or None

    def set(self, username: str) -> None:
        """Overwrite the stored username.

        Raises :class:`InvalidUsernameError` for a multi-line name; the
        stored value is left untouched.
        """
        if not is_single_line(username):
            raise InvalidUsernameError()
        atomic_write_text(self.repo.config_file, username)
        logger.info("Username set to '%s'", username)
