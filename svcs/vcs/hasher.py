"""Content hashing using stdlib hashlib (SHA-256)."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Iterable

from svcs.config import HASH_CHUNK_SIZE

logger = logging.getLogger(__name__)


class ContentHasher:
    """SHA-256 over the concatenated bytes of an ordered set of files."""

    @staticmethod
    def hash_files(paths: Iterable[str | Path]) -> str:
        """Return the hex digest of every existing file in *paths*, in order.

        Missing paths and directories are skipped.  Only file bytes are
        fed to the digest, so timestamps and permissions never change it.
        """
        h = hashlib.sha256()
        hashed = 0
        for path in paths:
            p = Path(path)
            if not p.is_file():
                logger.debug("Skipping missing file %s", p)
                continue
            with p.open("rb") as f:
                while True:
                    chunk = f.read(HASH_CHUNK_SIZE)
                    if not chunk:
                        break
                    h.update(chunk)
            hashed += 1
        digest = h.hexdigest()
        logger.debug("Hashed %d file(s): %s", hashed, digest)
        return digest
