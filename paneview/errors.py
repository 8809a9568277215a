"""Project exception types."""

from __future__ import annotations


class RuntimeStartError(RuntimeError):
    """The interactive UI could not be started or stopped abnormally."""


__all__ = ["RuntimeStartError"]
