"""Back-navigation stack of previously visited directories.

This is an undo stack, not browser history: going back never records the
directory being left, so there is no forward list.
"""

from __future__ import annotations

from pathlib import Path


def push_directory(history: tuple[Path, ...], directory: Path) -> tuple[Path, ...]:
    """Return ``history`` with ``directory`` on top."""
    return (*history, directory)


def pop_directory(history: tuple[Path, ...]) -> tuple[tuple[Path, ...], Path | None]:
    """Return ``(remaining, popped)``; ``popped`` is ``None`` when empty."""
    if not history:
        return history, None
    return history[:-1], history[-1]
