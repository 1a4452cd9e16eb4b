"""
File I/O utilities: whole-file reads and crash-safe writes.

All functions operate on explicit paths — no implicit directory lookups.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def read_text(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a whole text file."""
    with open(path, encoding=encoding) as f:
        return f.read()


def atomic_write(path: str | Path, content: str, encoding: str = "utf-8") -> None:
    """Write content via temp file + rename so a kill can't leave a partial file.

    Parent directories are created as needed. The temp file lives in the
    target's directory so the final ``os.replace`` stays on one filesystem.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)  # atomic on POSIX
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise
