"""File system helpers: atomic writes and copies via tempfile + rename."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def _temp_sibling(path: Path) -> tuple[int, str]:
    path.parent.mkdir(parents=True, exist_ok=True)
    return tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")


def atomic_write_text(path: str | Path, content: str) -> None:
    """Replace *path* with *content* so readers never see a partial file."""
    path = Path(path)
    fd, tmp_path = _temp_sibling(path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        _discard(tmp_path)
        raise


def atomic_append_text(path: str | Path, content: str) -> None:
    """Append *content* to *path* by rewriting the whole file atomically."""
    path = Path(path)
    existing = path.read_text(encoding="utf-8") if path.is_file() else ""
    atomic_write_text(path, existing + content)


def atomic_copy(src: str | Path, dest: str | Path) -> None:
    """Copy the bytes of *src* over *dest*, replacing it in one rename."""
    src, dest = Path(src), Path(dest)
    fd, tmp_path = _temp_sibling(dest)
    os.close(fd)
    try:
        shutil.copyfile(src, tmp_path)
        shutil.copymode(src, tmp_path)
        os.replace(tmp_path, dest)
    except BaseException:
        _discard(tmp_path)
        raise
    logger.debug("Copied %s -> %s", src, dest)


def read_lines(path: str | Path) -> list[str]:
    """Return the lines of a text store, or an empty list if it is absent."""
    path = Path(path)
    if not path.is_file():
        return []
    return path.read_text(encoding="utf-8").splitlines()


def _discard(tmp_path: str) -> None:
    try:
        os.unlink(tmp_path)
    except OSError:
        pass
