"""Terminal events and the per-event state transition."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..input import KeyContext, handle_key
from ..state import AppState
from .reconcile import reconcile


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class KeyPress:
    key: str


Event = Resize | KeyPress


def apply_event(state: AppState, event: Event, context: KeyContext) -> tuple[AppState, bool]:
    """Apply ``event`` to ``state`` without touching derived fields."""
    if isinstance(event, Resize):
        return replace(state, terminal_width=event.width, terminal_height=event.height), False
    return handle_key(state, event.key, context)


def step(state: AppState, event: Event, context: KeyContext) -> tuple[AppState, bool]:
    """Apply one event, then reconcile layout and content exactly once."""
    next_state, should_quit = apply_event(state, event, context)
    if should_quit:
        return next_state, True
    return reconcile(next_state), False
