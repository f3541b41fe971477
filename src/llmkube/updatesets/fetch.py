"""Latest-release lookup against the public GitHub releases API.

One GET per call, bounded by a short timeout, no retry and no backoff: this
feeds an advisory notice, so "offline" simply means "try again next run".
"""

from __future__ import annotations

from typing import Optional, Tuple

from .. import utils

GITHUB_RELEASES_URL = (
    "https://api.github.com/repos/defilantech/LLMKube/releases/latest"
)
RELEASES_PAGE_URL = "https://github.com/defilantech/LLMKube/releases/latest"
FETCH_TIMEOUT = 5.0


def fetch_latest_version(
    url: str = GITHUB_RELEASES_URL, timeout: float = FETCH_TIMEOUT
) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(tag, None)`` for the latest release or ``(None, error)``.

    The response must be a JSON object carrying a non-empty string
    ``tag_name``; anything else is reported as an error.
    """
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": f"llmkube/{utils.get_version()}",
    }
    data, error = utils.http_get_json(url, timeout=timeout, headers=headers)
    if error:
        return None, error
    if not isinstance(data, dict):
        return None, "unexpected response shape"
    tag = data.get("tag_name")
    if not isinstance(tag, str) or not tag.strip():
        return None, "missing tag_name"
    return tag, None


__all__ = [
    "GITHUB_RELEASES_URL",
    "RELEASES_PAGE_URL",
    "FETCH_TIMEOUT",
    "fetch_latest_version",
]
