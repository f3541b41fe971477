"""Self-update advisory, split into small modules.

Each module holds one cohesive part of the update logic (comparison, cache,
fetching, reporting, orchestration) and the public names are re-exported
here for easy import.
"""

from __future__ import annotations

from .types import CacheRecord, Ok, Skipped, UpdateCheckResult
from .version import compare_versions, is_version_newer, parse_version
from .cache import CacheStore
from .fetch import GITHUB_RELEASES_URL, RELEASES_PAGE_URL, fetch_latest_version
from .detect import detect_install_origin
from .report import emit_advisory, render_advisory, report_version_check, upgrade_hint
from .check import (
    CACHE_TTL,
    check_for_update,
    check_for_updates,
    is_fresh,
    resolve_latest_version,
)

__all__ = [
    "CacheRecord",
    "Ok",
    "Skipped",
    "UpdateCheckResult",
    "compare_versions",
    "is_version_newer",
    "parse_version",
    "CacheStore",
    "GITHUB_RELEASES_URL",
    "RELEASES_PAGE_URL",
    "fetch_latest_version",
    "detect_install_origin",
    "emit_advisory",
    "render_advisory",
    "report_version_check",
    "upgrade_hint",
    "CACHE_TTL",
    "check_for_update",
    "check_for_updates",
    "is_fresh",
    "resolve_latest_version",
]
