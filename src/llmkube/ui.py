"""Console UI helpers (color and messages).

This module centralizes tiny, dependency-free helpers for terminal output:
 - ANSI color/style codes gated by a conservative capability check
 - Convenience printers for info/ok/warn with consistent prefixes

Design goals:
 - No third-party dependencies; safe to import anywhere
 - Never raise on capability checks
 - Respect ``NO_COLOR`` and only emit ANSI when the target stream is a TTY
"""

from __future__ import annotations
import os
import sys
from typing import Optional, TextIO

# ANSI color/style codes (used only when supports_color() returns True)
RESET = "\033[0m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"


def supports_color(stream: Optional[TextIO] = None) -> bool:
    """Return True when ANSI colors are likely supported on ``stream``.

    Honors ``NO_COLOR`` to disable color globally and requires the stream
    (``sys.stdout`` by default) to be a TTY. Any errors during detection
    result in ``False``.
    """
    try:
        if os.environ.get("NO_COLOR"):
            return False
        stream = stream if stream is not None else sys.stdout
        return bool(getattr(stream, "isatty", lambda: False)())
    except Exception:
        return False


def c(s: str, color: str, stream: Optional[TextIO] = None) -> str:
    """Conditionally colorize a string for ``stream``.

    Returns the colorized string if supported, otherwise the original text.
    """
    return f"{color}{s}{RESET}" if supports_color(stream) else s


def info(msg: str) -> None:
    """Print an informational message prefixed with "ℹ"."""
    print(c("ℹ ", BLUE) + msg)


def ok(msg: str) -> None:
    """Print a success message prefixed with "✓"."""
    print(c("✓ ", GREEN) + msg)


def warn(msg: str) -> None:
    """Print a warning message prefixed with "!"."""
    print(c("! ", YELLOW) + msg)


__all__ = [
    "supports_color",
    "c",
    "info",
    "ok",
    "warn",
    "RESET",
    "GREEN",
    "YELLOW",
    "BLUE",
]
