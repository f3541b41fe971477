"""Safe I/O helpers (well-known paths and atomic writes).

This module provides a tiny set of dependency-free utilities for the files the
CLI keeps under the user's home directory:
 - Well-known paths under ``LLMKUBE_HOME`` (default: ``~/.llmkube``)
 - Private directory creation (owner read/write/execute only)
 - Atomic text writes with fsync so readers never see a half-written file

Paths are resolved at call time rather than import time so that tests (and
users) can point ``LLMKUBE_HOME`` somewhere else without reloading modules.
"""

from __future__ import annotations
import os
import tempfile
from pathlib import Path

VERSION_CACHE_NAME = "version_cache.json"
PRIVATE_DIR_MODE = 0o700


def llmkube_home() -> Path:
    """Return the directory holding per-user llmkube state.

    Honors ``LLMKUBE_HOME``; otherwise ``~/.llmkube``. May raise
    ``RuntimeError`` when the home directory cannot be determined.
    """
    override = os.environ.get("LLMKUBE_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".llmkube"


def version_cache_path() -> Path:
    """Return the path of the update-check cache file."""
    return llmkube_home() / VERSION_CACHE_NAME


def ensure_private_dir(path: Path) -> Path:
    """Create ``path`` (and parents) with owner-only permissions if missing.

    Existing directories are left untouched. Errors propagate to the caller.
    """
    path.mkdir(mode=PRIVATE_DIR_MODE, parents=True, exist_ok=True)
    return path


def atomic_write(path: Path, text: str) -> None:
    """Atomically write UTF-8 text to ``path`` with fsync.

    Writes to a temporary file in the same directory (created ``0o600`` by
    :func:`tempfile.mkstemp`), then renames into place. Propagates write
    errors after cleaning up the temporary file.
    """
    ensure_private_dir(path.parent)
    fd, tmppath = tempfile.mkstemp(
        prefix=path.name + ".", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError:  # pragma: no cover
                pass
        os.replace(tmppath, path)
    except BaseException:
        try:
            os.remove(tmppath)
        except OSError:  # pragma: no cover
            pass
        raise


__all__ = [
    "VERSION_CACHE_NAME",
    "PRIVATE_DIR_MODE",
    "llmkube_home",
    "version_cache_path",
    "ensure_private_dir",
    "atomic_write",
]
