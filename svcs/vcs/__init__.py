"""Commit/storage engine for SVCS.

Every component takes an explicit :class:`Repository` handle.
"""

from svcs.vcs.commits import CommitStore, RestoreAction
from svcs.vcs.engine import Engine
from svcs.vcs.hasher import ContentHasher
from svcs.vcs.history import Commit, CommitLog
from svcs.vcs.index import AddOutcome, Index
from svcs.vcs.repo import Repository, VcsError
from svcs.vcs.settings import UserConfig

__all__ = [
    "AddOutcome",
    "Commit",
    "CommitLog",
    "CommitStore",
    "ContentHasher",
    "Engine",
    "Index",
    "Repository",
    "RestoreAction",
    "UserConfig",
    "VcsError",
]
