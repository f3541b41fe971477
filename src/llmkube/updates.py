"""Thin facade over the updatesets modules.

Callers import the update advisory from here; the implementation lives in
``src/llmkube/updatesets/``.
"""

from __future__ import annotations

from .updatesets import (
    CACHE_TTL,
    CacheRecord,
    CacheStore,
    Ok,
    Skipped,
    UpdateCheckResult,
    check_for_update,
    check_for_updates,
    compare_versions,
    detect_install_origin,
    fetch_latest_version,
    is_version_newer,
    report_version_check,
    resolve_latest_version,
)

__all__ = [
    "CACHE_TTL",
    "CacheRecord",
    "CacheStore",
    "Ok",
    "Skipped",
    "UpdateCheckResult",
    "check_for_update",
    "check_for_updates",
    "compare_versions",
    "detect_install_origin",
    "fetch_latest_version",
    "is_version_newer",
    "report_version_check",
    "resolve_latest_version",
]
