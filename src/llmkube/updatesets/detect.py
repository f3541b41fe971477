"""Guess how llmkube was installed so the advisory can suggest the right upgrade.

Origins: ``binary`` (frozen executable), ``homebrew``, ``pypi`` (installed
into a site/dist-packages directory), ``git`` (working copy) and ``source``
(anything else). Detection never raises.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable, Optional

_PACKAGE_DIRS = {"site-packages", "dist-packages"}


def _brew_roots() -> Iterable[Path]:
    cellar = os.environ.get("HOMEBREW_CELLAR")
    if cellar:
        yield Path(cellar)
    prefix = os.environ.get("HOMEBREW_PREFIX")
    if prefix:
        yield Path(prefix) / "Cellar"


def _under(path: Path, root: Path) -> bool:
    try:
        path.relative_to(root.resolve())
    except (OSError, RuntimeError, ValueError):
        return False
    return True


def detect_install_origin(
    module_path: Optional[Path] = None,
    *,
    frozen: Optional[bool] = None,
    max_git_depth: int = 4,
) -> str:
    """Return ``binary``, ``homebrew``, ``pypi``, ``git`` or ``source``.

    ``module_path`` and ``frozen`` override the running module's location and
    ``sys.frozen``; ``max_git_depth`` bounds the upward search for ``.git``.
    """
    if frozen if frozen is not None else getattr(sys, "frozen", False):
        return "binary"

    here = (module_path or Path(__file__)).resolve()
    if any(_under(here, root) for root in _brew_roots()):
        return "homebrew"

    names = [p.name.lower() for p in here.parents]
    if "cellar" in names:
        return "homebrew"
    if _PACKAGE_DIRS.intersection(names):
        return "pypi"

    if any((p / ".git").exists() for p in list(here.parents)[:max_git_depth]):
        return "git"
    return "source"


__all__ = ["detect_install_origin"]
