"""Typed containers for the update check.

``CacheRecord`` is the persisted "latest known release" entry. ``Ok`` and
``Skipped`` form the internal outcome of resolving the latest version: a check
that cannot complete is a ``Skipped`` value carrying the reason, never an
exception. ``UpdateCheckResult`` summarizes one advisor run.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

from .version import is_version_newer

# Fractional seconds, normalized to exactly six digits before parsing.
_FRACTION = re.compile(r"\.(\d+)")


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an RFC 3339 / ISO-8601 timestamp into an aware UTC datetime.

    Accepts a trailing ``Z`` and any number of fractional digits. Naive
    values are taken as UTC. Returns ``None`` when unparsable.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        ts = datetime.fromisoformat(text)
    except ValueError:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


@dataclass
class CacheRecord:
    """Last known latest release and when it was learned."""

    latest_version: str
    checked_at: datetime

    def to_cache(self) -> dict:
        checked_at = self.checked_at
        if checked_at.tzinfo is None:
            checked_at = checked_at.replace(tzinfo=timezone.utc)
        return {
            "latest_version": self.latest_version,
            "checked_at": checked_at.astimezone(timezone.utc).isoformat(),
        }

    @classmethod
    def from_cache(cls, data: object) -> Optional["CacheRecord"]:
        if not isinstance(data, dict):
            return None
        latest = data.get("latest_version")
        checked_at = data.get("checked_at")
        if not isinstance(latest, str) or not latest.strip():
            return None
        if not isinstance(checked_at, str):
            return None
        ts = parse_timestamp(checked_at)
        if ts is None:
            return None
        return cls(latest_version=latest, checked_at=ts)


@dataclass
class Ok:
    """The latest version was resolved."""

    version: str
    used_cache: bool = False


@dataclass
class Skipped:
    """The check could not complete; ``reason`` says why."""

    reason: str


LookupOutcome = Union[Ok, Skipped]


@dataclass
class UpdateCheckResult:
    """What a single update check decided."""

    current_version: str
    latest_version: Optional[str]
    used_cache: bool
    skipped: Optional[str] = None

    @property
    def has_newer(self) -> bool:
        return bool(self.latest_version) and is_version_newer(
            self.current_version, self.latest_version or ""
        )


__all__ = [
    "CacheRecord",
    "Ok",
    "Skipped",
    "LookupOutcome",
    "UpdateCheckResult",
    "parse_timestamp",
]
