"""Index — the ordered list of tracked file names."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from svcs.vcs.fs import atomic_append_text, read_lines
from svcs.vcs.repo import Repository, TrackedFileNotFoundError

logger = logging.getLogger(__name__)


class AddOutcome(str, Enum):
    TRACKED = "tracked"
    ALREADY_TRACKED = "already_tracked"


class Index:
    """Registration list stored as ``index.txt``, one base name per line.

    Names keep their insertion order; that order drives hashing and
    snapshot order.
    """

    def __init__(self, repo: Repository) -> None:
        self.repo = repo

    def list(self) -> list[str]:
        """Return tracked names in insertion order."""
        return [line for line in read_lines(self.repo.index_file) if line.strip()]

    def is_empty(self) -> bool:
        return not self.list()

    def __contains__(self, name: object) -> bool:
        return name in self.list()

    def add(self, path: str | Path) -> AddOutcome:
        """Track the file at *path* by its base name.

        Raises :class:`TrackedFileNotFoundError` if *path* does not exist.
        """
        p = Path(path)
        if not p.is_absolute():
            p = self.repo.workdir / p
        if not p.exists():
            raise TrackedFileNotFoundError(p.name)

        if p.name in self:
            logger.debug("'%s' is already tracked", p.name)
            return AddOutcome.ALREADY_TRACKED

        atomic_append_text(self.repo.index_file, f"{p.name}\n")
        logger.info("Tracking '%s'", p.name)
        return AddOutcome.TRACKED
