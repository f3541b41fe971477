"""On-disk cache for the latest known release.

``CacheStore`` owns a single JSON file (``version_cache.json`` under
``LLMKUBE_HOME``). Reads never raise: anything that keeps a valid record from
being loaded is reported as "no cache". Writes replace the whole file
atomically and report failure with ``False`` instead of raising.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from ..io_safe import atomic_write, ensure_private_dir, version_cache_path
from .types import CacheRecord


class CacheStore:
    """Read/write access to the update-check cache file.

    ``path`` defaults to :func:`llmkube.io_safe.version_cache_path`, resolved
    on every call so environment changes are picked up.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path:
        return self._path if self._path is not None else version_cache_path()

    def _resolve(self) -> Path:
        path = self.path
        ensure_private_dir(path.parent)
        return path

    def read(self) -> Optional[CacheRecord]:
        try:
            raw = self._resolve().read_text(encoding="utf-8")
            data = json.loads(raw)
        except (OSError, RuntimeError, ValueError):
            return None
        return CacheRecord.from_cache(data)

    def write(self, record: CacheRecord) -> bool:
        try:
            path = self._resolve()
            atomic_write(path, json.dumps(record.to_cache(), indent=2) + "\n")
        except (OSError, RuntimeError):
            return False
        return True


__all__ = ["CacheStore"]
