"""llmkube command-line client."""

from .cli import main

__all__ = ["main"]
