"""Public runtime orchestration entry points.

This package groups the interactive bootstrap (`run_app`), the event loop,
and the per-event transition (`step`) used by tests and the loop itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import RuntimeLoopIO


def run_app(*args, **kwargs):
    """Lazily import the app entrypoint to avoid terminal setup on import."""
    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "RuntimeLoopIO":
        from . import loop as _loop

        return getattr(_loop, name)
    if name in {"KeyPress", "Resize", "step", "apply_event"}:
        from . import events as _events

        return getattr(_events, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "KeyPress",
    "Resize",
    "RuntimeLoopIO",
    "apply_event",
    "run_app",
    "run_main_loop",
    "step",
]
