"""CommitLog — append-only, line-oriented commit history.

Each record is four lines, oldest record first::

    <blank>
    <message>
    Author: <name>
    commit <id>

Display enumerates the lines newest first.
"""

from __future__ import annotations

import logging
from typing import Iterator

from pydantic import BaseModel

from svcs.config import AUTHOR_PREFIX, COMMIT_PREFIX, CONTENT_HASH_LENGTH
from svcs.vcs.fs import atomic_append_text, read_lines
from svcs.vcs.repo import InvalidMessageError, InvalidUsernameError, Repository

logger = logging.getLogger(__name__)


def is_single_line(text: str) -> bool:
    return not text or text.splitlines() == [text]


def check_message(message: str) -> None:
    """Raise :class:`InvalidMessageError` unless *message* fits on one line."""
    if not is_single_line(message):
        raise InvalidMessageError("Commit message must be a single line.")


class Commit(BaseModel):
    """A single recorded commit."""

    id: str
    message: str
    author: str

    @property
    def content_hash(self) -> str:
        """The content digest embedded at the start of the id."""
        return self.id[:CONTENT_HASH_LENGTH]

    def render(self) -> list[str]:
        """Return the log lines for this commit, separator first."""
        return ["", self.message, f"{AUTHOR_PREFIX}{self.author}", f"{COMMIT_PREFIX}{self.id}"]


class CommitLog:
    """Commit history stored in ``log.txt``.

    Parameters
    ----------
    repo:
        The repository whose log is read and appended.
    """

    def __init__(self, repo: Repository) -> None:
        self.repo = repo

    def _lines(self) -> list[str]:
        return read_lines(self.repo.log_file)

    def is_empty(self) -> bool:
        return not any(line.strip() for line in self._lines())

    def last_commit_id(self) -> str | None:
        """Return the id of the most recent commit, or *None* for an empty log."""
        for line in reversed(self._lines()):
            if line.startswith(COMMIT_PREFIX):
                return line[len(COMMIT_PREFIX):]
        return None

    def exists(self, commit_id: str) -> bool:
        """Return *True* if a ``commit <commit_id>`` line is present."""
        target = f"{COMMIT_PREFIX}{commit_id}"
        return any(line == target for line in self._lines())

    def append(self, message: str, author: str, commit_id: str) -> Commit:
        """Append a commit record and return it."""
        check_message(message)
        if not is_single_line(author):
            raise InvalidUsernameError()
        commit = Commit(id=commit_id, message=message, author=author)
        atomic_append_text(
            self.repo.log_file,
            "".join(f"{line}\n" for line in commit.render()),
        )
        logger.info("Logged commit %s by %s", commit_id, author)
        return commit

    def enumerate(self) -> Iterator[str]:
        """Yield log lines newest first.

        Storage is re-read on every call, so the iterator reflects the
        log as it is when iteration starts.
        """
        yield from reversed(self._lines())

    def commits(self) -> list[Commit]:
        """Return parsed commit records, newest first."""
        records: list[Commit] = []
        lines = self._lines()
        for i, line in enumerate(lines):
            if not line.startswith(COMMIT_PREFIX) or i < 2:
                continue
            author_line = lines[i - 1]
            if not author_line.startswith(AUTHOR_PREFIX):
                logger.warning("Malformed log record before line %d", i + 1)
                continue
            records.append(
                Commit(
                    id=line[len(COMMIT_PREFIX):],
                    message=lines[i - 2],
                    author=author_line[len(AUTHOR_PREFIX):],
                )
            )
        records.reverse()
        return records
