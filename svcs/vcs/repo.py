"""Repository — the root-path handle shared by every store.

A :class:`Repository` is passed explicitly into the index, log, snapshot
store, and engine; nothing reads a global location.
"""

from __future__ import annotations

import logging
from pathlib import Path

from svcs.config import (
    COMMITS_DIR,
    CONFIG_FILE,
    DEFAULT_VCS_DIR,
    INDEX_FILE,
    LOG_FILE,
)

logger = logging.getLogger(__name__)


class VcsError(Exception):
    """Base class for expected, user-reportable failures.

    ``str(exc)`` is the message shown to the user.
    """


class TrackedFileNotFoundError(VcsError):
    """Raised when ``add`` targets a path that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Can't find '{name}'.")
        self.name = name


class NoUsernameError(VcsError):
    def __init__(self) -> None:
        super().__init__("No username given.")


class NoTrackedFilesError(VcsError):
    def __init__(self) -> None:
        super().__init__("No tracked files.")


class NothingToCommitError(VcsError):
    """Raised when tracked content matches the previous commit."""

    def __init__(self) -> None:
        super().__init__("Nothing to commit.")


class MissingArgumentError(VcsError):
    """Raised when a required command argument was not passed."""


class CommitNotFoundError(VcsError):
    def __init__(self, commit_id: str) -> None:
        super().__init__("Commit does not exist.")
        self.commit_id = commit_id


class NoCommitsError(VcsError):
    def __init__(self) -> None:
        super().__init__("No commits yet.")


class InvalidMessageError(VcsError):
    """Raised for commit messages that cannot be stored on one line."""


class InvalidUsernameError(VcsError):
    """Raised for usernames that cannot be stored on the ``Author:`` line."""

    def __init__(self) -> None:
        super().__init__("Username must be a single line.")


class Repository:
    """Locate the store files of one repository.

    Parameters
    ----------
    path:
        Repository directory holding ``config.txt``, ``index.txt``,
        ``log.txt`` and ``commits/``.
    workdir:
        Directory the tracked files live in.  Defaults to the current
        working directory at construction time.
    """

    def __init__(
        self,
        path: str | Path = DEFAULT_VCS_DIR,
        workdir: str | Path | None = None,
    ) -> None:
        self.path = Path(path).resolve()
        self.workdir = Path(workdir).resolve() if workdir is not None else Path.cwd()

    def __repr__(self) -> str:
        return f"Repository(path={str(self.path)!r}, workdir={str(self.workdir)!r})"

    # -- Layout ---------------------------------------------------------------

    @property
    def config_file(self) -> Path:
        return self.path / CONFIG_FILE

    @property
    def index_file(self) -> Path:
        return self.path / INDEX_FILE

    @property
    def log_file(self) -> Path:
        return self.path / LOG_FILE

    @property
    def commits_dir(self) -> Path:
        return self.path / COMMITS_DIR

    def working_file(self, name: str) -> Path:
        """Return the working-directory path of tracked file *name*."""
        return self.workdir / name

    # -- Initialisation -------------------------------------------------------

    def is_initialised(self) -> bool:
        return self.path.is_dir()

    def init(self) -> Path:
        """Create the repository directory and empty store files.

        Safe to call on an existing repository; nothing is overwritten.
        Returns the repository path.
        """
        created = not self.is_initialised()
        self.commits_dir.mkdir(parents=True, exist_ok=True)
        for store in (self.config_file, self.index_file, self.log_file):
            store.touch(exist_ok=True)
        if created:
            logger.info("Initialised SVCS repository at %s", self.path)
        return self.path
