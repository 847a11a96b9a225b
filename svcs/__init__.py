"""SVCS — a simple version control system for a flat list of tracked files."""

__version__ = "1.0.0"

from svcs.vcs.commits import CommitStore, RestoreAction
from svcs.vcs.engine import Engine
from svcs.vcs.hasher import ContentHasher
from svcs.vcs.history import Commit, CommitLog
from svcs.vcs.index import AddOutcome, Index
from svcs.vcs.repo import (
    CommitNotFoundError,
    InvalidMessageError,
    InvalidUsernameError,
    MissingArgumentError,
    NoCommitsError,
    NothingToCommitError,
    NoTrackedFilesError,
    NoUsernameError,
    Repository,
    TrackedFileNotFoundError,
    VcsError,
)
from svcs.vcs.settings import UserConfig

__all__ = [
    "__version__",
    # Engine
    "Engine",
    "Repository",
    # Stores
    "AddOutcome",
    "Commit",
    "CommitLog",
    "CommitStore",
    "ContentHasher",
    "Index",
    "RestoreAction",
    "UserConfig",
    # Errors
    "CommitNotFoundError",
    "InvalidMessageError",
    "InvalidUsernameError",
    "MissingArgumentError",
    "NoCommitsError",
    "NothingToCommitError",
    "NoTrackedFilesError",
    "NoUsernameError",
    "TrackedFileNotFoundError",
    "VcsError",
]
