"""Testing helpers for torchnumerics."""

from . import strategies

__all__ = ["strategies"]
