from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, TextIO, Tuple

from ..logging_utils import log_event
from ..utils import get_version
from .cache import CacheStore
from .detect import detect_install_origin
from .fetch import fetch_latest_version
from .report import emit_advisory
from .types import CacheRecord, LookupOutcome, Ok, Skipped, UpdateCheckResult

CACHE_TTL = timedelta(hours=24)

Fetcher = Callable[[], Tuple[Optional[str], Optional[str]]]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_fresh(record: CacheRecord, now: datetime, ttl: timedelta = CACHE_TTL) -> bool:
    return now - record.checked_at < ttl


def resolve_latest_version(
    store: CacheStore,
    fetch: Fetcher,
    *,
    now: Optional[datetime] = None,
    force: bool = False,
) -> LookupOutcome:
    """Return the latest release as ``Ok`` or say why it is unknown.

    A cache entry younger than ``CACHE_TTL`` is used without touching the
    network unless ``force`` is set. A successful fetch is written back to
    the cache; a failed write is logged and otherwise ignored.
    """
    now = now or _utcnow()
    if not force:
        record = store.read()
        if record is not None and is_fresh(record, now):
            log_event(
                "update_check_cache_hit",
                logging.DEBUG,
                latest=record.latest_version,
            )
            return Ok(record.latest_version, used_cache=True)

    latest, error = fetch()
    if error or not latest:
        reason = error or "no release found"
        log_event("update_check_skipped", logging.DEBUG, reason=reason)
        return Skipped(reason)

    if not store.write(CacheRecord(latest_version=latest, checked_at=now)):
        log_event(
            "update_cache_write_failed", logging.DEBUG, path=str(store.path)
        )
    return Ok(latest, used_cache=False)


def check_for_updates(
    current_version: str,
    store: Optional[CacheStore] = None,
    fetch: Optional[Fetcher] = None,
    *,
    now: Optional[datetime] = None,
    force: bool = False,
) -> UpdateCheckResult:
    """Resolve the latest release and compare it with ``current_version``."""
    outcome = resolve_latest_version(
        store or CacheStore(),
        fetch or fetch_latest_version,
        now=now,
        force=force,
    )
    if isinstance(outcome, Skipped):
        return UpdateCheckResult(
            current_version=current_version,
            latest_version=None,
            used_cache=False,
            skipped=outcome.reason,
        )
    result = UpdateCheckResult(
        current_version=current_version,
        latest_version=outcome.version,
        used_cache=outcome.used_cache,
    )
    log_event(
        "update_check_completed",
        logging.DEBUG,
        current=current_version,
        latest=outcome.version,
        used_cache=outcome.used_cache,
        newer=result.has_newer,
        forced=force,
    )
    return result


def check_for_update(
    current_version: Optional[str] = None,
    *,
    store: Optional[CacheStore] = None,
    fetch: Optional[Fetcher] = None,
    now: Optional[datetime] = None,
    stream: Optional[TextIO] = None,
    origin: Optional[str] = None,
) -> None:
    """Print an advisory to stderr when a newer release exists.

    Meant to run once before any subcommand. It never raises and stays
    silent when offline, when the cache is unusable or when the tool is up
    to date.
    """
    try:
        current = current_version or get_version()
        result = check_for_updates(current, store, fetch, now=now)
        if result.has_newer and result.latest_version:
            emit_advisory(
                result.latest_version,
                current,
                origin or detect_install_origin(),
                stream,
            )
    except Exception as exc:
        log_event("update_check_failed", logging.DEBUG, reason=str(exc))


__all__ = [
    "CACHE_TTL",
    "is_fresh",
    "resolve_latest_version",
    "check_for_updates",
    "check_for_update",
]
