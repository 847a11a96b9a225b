"""Global configuration: repository layout and constants."""

from pathlib import Path

# Default repository directory, relative to the working directory
DEFAULT_VCS_DIR = Path("vcs")

# Store files inside the repository directory
CONFIG_FILE = "config.txt"
INDEX_FILE = "index.txt"
LOG_FILE = "log.txt"

# Sub-folder holding one snapshot directory per commit id
COMMITS_DIR = "commits"

# Read size used when streaming file bytes into the hasher
HASH_CHUNK_SIZE = 65536

# SHA-256 hex digest length; the commit id starts with this many chars
CONTENT_HASH_LENGTH = 64

# Log record line prefixes
AUTHOR_PREFIX = "Author: "
COMMIT_PREFIX = "commit "
