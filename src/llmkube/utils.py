"""Utility helpers for the llmkube CLI.

This module gathers small, dependency-free helpers used across the tool:
 - Version discovery for the installed/package build
 - Lightweight HTTP JSON fetch with short timeouts

Design goals:
 - No third-party dependencies (stdlib only)
 - Fail safe: helpers return benign values instead of raising for
   environmental problems (no metadata, offline, bad responses)
"""

from __future__ import annotations
import http.client
import json
import re
import socket
import threading
import urllib.error
import urllib.request
from importlib.metadata import PackageNotFoundError, distribution
from importlib.metadata import version as pkg_version
from pathlib import Path
from typing import Dict, Optional, Tuple

DIST_NAME = "llmkube"
UNKNOWN_VERSION = "0.0.0+unknown"


def get_version() -> str:
    """Return the tool version string.

    Lookup order (first match wins):
    1) ``importlib.metadata.version('llmkube')`` (installed package)
    2) Parse ``pyproject.toml`` for ``project.version`` (source checkout)
    3) Fallback string ``"0.0.0+unknown"``
    """
    try:
        return pkg_version(DIST_NAME)
    except PackageNotFoundError:
        pass

    pyproj = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        text = pyproj.read_text(encoding="utf-8")
    except OSError:
        return UNKNOWN_VERSION
    m = re.search(r"(?ms)^\[project\].*?^version\s*=\s*\"([^\"]+)\"", text)
    if m:
        return m.group(1)
    return UNKNOWN_VERSION


def get_git_commit() -> str:
    """Return the commit the package was installed from, or ``"unknown"``.

    pip records it in ``direct_url.json`` (PEP 610) for VCS installs such as
    ``pip install git+https://...``; release wheels carry no commit.
    """
    try:
        raw = distribution(DIST_NAME).read_text("direct_url.json")
    except PackageNotFoundError:
        return "unknown"
    try:
        data = json.loads(raw or "{}")
    except ValueError:
        return "unknown"
    vcs = data.get("vcs_info") if isinstance(data, dict) else None
    commit = vcs.get("commit_id") if isinstance(vcs, dict) else None
    return commit if isinstance(commit, str) and commit else "unknown"


def _get_json_once(
    url: str, timeout: float, headers: Dict[str, str]
) -> Tuple[Optional[object], Optional[str]]:
    req = urllib.request.Request(url, headers=headers, method="GET")
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = getattr(resp, "status", 200)
            if not 200 <= status < 300:
                return None, f"HTTP {status}: {getattr(resp, 'reason', '')}".strip()
            body = resp.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as e:
        return None, f"HTTP {e.code}: {e.reason}"
    except urllib.error.URLError as e:
        return None, f"connection error: {e.reason}"
    except (socket.timeout, TimeoutError):
        return None, "timed out"
    except (OSError, ValueError, http.client.HTTPException) as e:
        return None, str(e) or e.__class__.__name__
    try:
        return json.loads(body), None
    except ValueError:
        return None, "invalid JSON"


def http_get_json(
    url: str,
    timeout: float = 5.0,
    headers: Optional[Dict[str, str]] = None,
) -> Tuple[Optional[object], Optional[str]]:
    """Fetch a small JSON document with a single GET request.

    Parameters
    - ``url``: Absolute URL to request.
    - ``timeout``: Ceiling in seconds for the whole request (defaults to 5.0),
      name resolution and a slowly trickling body included.
    - ``headers``: Optional extra request headers.

    Returns
    - Tuple ``(data, error)``. On success ``data`` is the decoded JSON value
      and ``error`` is ``None``; on failure ``data`` is ``None`` and ``error``
      holds a short message (e.g. ``"HTTP 404: Not Found"``, ``"timed out"``).

    Exactly one attempt is made; there is no retry. The request runs on a
    daemon thread so an unfinished one is abandoned at the deadline and never
    holds up interpreter exit.
    """
    outcome: Dict[str, Tuple[Optional[object], Optional[str]]] = {}

    def worker():
        try:
            outcome["result"] = _get_json_once(url, timeout, dict(headers or {}))
        except Exception as e:  # pragma: no cover
            outcome["result"] = (None, str(e) or e.__class__.__name__)

    t = threading.Thread(target=worker, name="http-get-json", daemon=True)
    t.start()
    t.join(timeout)
    if t.is_alive() or "result" not in outcome:
        return None, "timed out"
    return outcome["result"]


__all__ = [
    "DIST_NAME",
    "UNKNOWN_VERSION",
    "get_version",
    "get_git_commit",
    "http_get_json",
    "pkg_version",
]
