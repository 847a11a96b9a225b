"""CommitStore — per-commit snapshot directories and restoration."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable

from svcs.vcs.fs import atomic_copy
from svcs.vcs.repo import Repository

logger = logging.getLogger(__name__)


class RestoreAction(str, Enum):
    RESTORED = "restored"
    DELETED = "deleted"
    SKIPPED = "skipped"


class CommitStore:
    """Store a copy of the tracked files under ``commits/<id>/``.

    Snapshots are never removed.

    Parameters
    ----------
    repo:
        The repository owning the ``commits`` directory.
    """

    def __init__(self, repo: Repository) -> None:
        self.repo = repo

    def snapshot_dir(self, commit_id: str) -> Path:
        return self.repo.commits_dir / commit_id

    def has_snapshot(self, commit_id: str) -> bool:
        return self.snapshot_dir(commit_id).is_dir()

    def snapshot(self, commit_id: str, names: Iterable[str]) -> Path:
        """Copy every tracked file that exists into the snapshot for *commit_id*.

        An existing snapshot directory is reused.  Returns its path.
        """
        snap_dir = self.snapshot_dir(commit_id)
        snap_dir.mkdir(parents=True, exist_ok=True)

        copied = 0
        for name in names:
            src = self.repo.working_file(name)
            if not src.is_file():
                logger.debug("Not snapshotting missing file '%s'", name)
                continue
            atomic_copy(src, snap_dir / name)
            copied += 1

        logger.info("Snapshot %s holds %d file(s)", commit_id, copied)
        return snap_dir

    def restore(self, commit_id: str, names: Iterable[str]) -> dict[str, RestoreAction]:
        """Bring the working files in line with the snapshot for *commit_id*.

        A tracked file absent from the snapshot did not exist at that
        commit, so its working copy is deleted.
        """
        snap_dir = self.snapshot_dir(commit_id)
        actions: dict[str, RestoreAction] = {}

        for name in names:
            stored = snap_dir / name
            target = self.repo.working_file(name)
            if stored.is_file():
                atomic_copy(stored, target)
                actions[name] = RestoreAction.RESTORED
            elif target.is_file():
                target.unlink()
                actions[name] = RestoreAction.DELETED
                logger.debug("Deleted '%s' (absent from %s)", name, commit_id)
            else:
                actions[name] = RestoreAction.SKIPPED

        logger.info("Restored %d file(s) from %s", len(actions), commit_id)
        return actions
