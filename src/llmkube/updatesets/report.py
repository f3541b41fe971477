from __future__ import annotations

import sys
from typing import Optional, TextIO

from ..ui import YELLOW, c, info, ok, warn
from .fetch import RELEASES_PAGE_URL
from .version import compare_versions


_UPGRADE_HINTS = {
    "pypi": "pip install --upgrade llmkube",
    "homebrew": "brew upgrade llmkube",
    "git": "git pull && pip install -e .",
    "source": "pip install -e . from the new release source",
    "binary": "replace the llmkube binary with the release download",
}


def upgrade_hint(origin: str) -> str:
    # Unknown origins get the default distribution channel.
    return _UPGRADE_HINTS.get((origin or "").lower(), "brew upgrade llmkube")


def render_advisory(
    latest: str, current: str, origin: str, stream: Optional[TextIO] = None
) -> str:
    """Build the multi-line "new version available" notice."""
    prefix = c("!", YELLOW, stream)
    return (
        "\n"
        f"{prefix} New version available: {latest} (current: {current})\n"
        f"   Update with: {upgrade_hint(origin)}\n"
        f"   Or download from: {RELEASES_PAGE_URL}\n"
        "\n"
    )


def emit_advisory(
    latest: str, current: str, origin: str, stream: Optional[TextIO] = None
) -> None:
    # One write + flush so the notice never interleaves mid-line.
    stream = stream if stream is not None else sys.stderr
    stream.write(render_advisory(latest, current, origin, stream))
    stream.flush()


def report_version_check(
    current: str, latest: Optional[str], error: Optional[str], origin: str
) -> None:
    """Human-readable outcome of an explicit ``version --check``."""
    if error or not latest:
        info(f"Unable to check for updates: {error or 'no release found'}")
        return
    order = compare_versions(current, latest)
    if order == 0:
        ok("You're running the latest version!")
    elif order < 0:
        warn(f"New version available: {latest}")
        print(f"   Update with: {upgrade_hint(origin)}")
        print(f"   Or download from: {RELEASES_PAGE_URL}")
    else:
        info("You're running a development version")


__all__ = [
    "upgrade_hint",
    "render_advisory",
    "emit_advisory",
    "report_version_check",
]
