"""Engine — config, add, commit, log, and checkout over one repository.

All state lives in the repository's store files; the engine holds only
handles to them.  Expected precondition failures are raised as
:class:`~svcs.vcs.repo.VcsError` subclasses.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Iterator

from svcs.vcs.commits import CommitStore, RestoreAction
from svcs.vcs.hasher import ContentHasher
from svcs.vcs.history import Commit, CommitLog, check_message
from svcs.vcs.index import AddOutcome, Index
from svcs.vcs.repo import (
    CommitNotFoundError,
    MissingArgumentError,
    NoCommitsError,
    NothingToCommitError,
    NoTrackedFilesError,
    NoUsernameError,
    Repository,
)
from svcs.vcs.settings import UserConfig

logger = logging.getLogger(__name__)


def _unique_suffix() -> str:
    return str(time.time_ns())


class Engine:
    """Orchestrate the stores of a single repository.

    Parameters
    ----------
    repo:
        The repository to operate on.  Its directory tree is created on
        construction if missing.
    """

    def __init__(self, repo: Repository) -> None:
        self.repo = repo
        repo.init()
        self.index = Index(repo)
        self.commit_log = CommitLog(repo)
        self.store = CommitStore(repo)
        self.user_config = UserConfig(repo)

    # -- config ---------------------------------------------------------------

    def config(
        self,
        username: str | None = None,
        prompt: Callable[[], str] | None = None,
    ) -> str:
        """Set or read the username and return the current value.

        Parameters
        ----------
        username:
            New username to persist.
        prompt:
            Called to ask for a username when none is given and none is
            stored yet.
        """
        if username is not None:
            self.user_config.set(username)
        elif self.user_config.get() is None and prompt is not None:
            self.user_config.set(prompt())

        current = self.user_config.get()
        if current is None:
            raise NoUsernameError()
        return current

    # -- add ------------------------------------------------------------------

    def add(self, path: str | Path) -> AddOutcome:
        return self.index.add(path)

    def tracked_files(self) -> list[str]:
        return self.index.list()

    # -- commit ---------------------------------------------------------------

    def commit(self, message: str | None) -> Commit:
        """Record a snapshot of the tracked files if their content changed.

        The snapshot is written before the log entry; a commit exists
        only once its log entry does.
        """
        if not message:
            raise MissingArgumentError("Message was not passed.")
        check_message(message)

        author = self.user_config.get()
        if author is None:
            raise NoUsernameError()

        if self.index.is_empty():
            raise NoTrackedFilesError()
        names = self.index.list()

        content_hash = ContentHasher.hash_files(self.repo.working_file(n) for n in names)
        previous = self.commit_log.last_commit_id()
        if previous is not None and previous.startswith(content_hash):
            logger.debug("Content unchanged since %s", previous)
            raise NothingToCommitError()

        commit_id = f"{content_hash}{_unique_suffix()}"
        self.store.snapshot(commit_id, names)
        commit = self.commit_log.append(message, author, commit_id)

        logger.info("Committed %s (%d tracked file(s))", commit_id, len(names))
        return commit

    # -- log ------------------------------------------------------------------

    def log(self) -> Iterator[str]:
        """Return the log lines newest first."""
        if self.commit_log.is_empty():
            raise NoCommitsError()
        return self.commit_log.enumerate()

    def history(self) -> list[Commit]:
        return self.commit_log.commits()

    # -- checkout -------------------------------------------------------------

    def checkout(self, commit_id: str | None) -> dict[str, RestoreAction]:
        """Restore the tracked files to their state at *commit_id*."""
        if not commit_id:
            raise MissingArgumentError("Commit id was not passed.")
        if not self.commit_log.exists(commit_id):
            raise CommitNotFoundError(commit_id)
        if not self.store.has_snapshot(commit_id):
            # Never reconcile deletions against an absent snapshot.
            logger.error("Snapshot missing for logged commit %s", commit_id)
            raise CommitNotFoundError(commit_id)

        actions = self.store.restore(commit_id, self.index.list())
        logger.info("Switched to commit %s", commit_id)
        return actions
