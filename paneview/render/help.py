"""Contextual key-hint line shown at the top of every frame.

Presentation-only: hints are derived from the current mode, focus, and
fullscreen flag.
"""

from __future__ import annotations

from ..ansi import fit_ansi_line
from ..state import AppState, Mode, Pane
from ..ui_theme import UITheme

HINT_SEPARATOR = "    "

QUIT_HINT = ("q/ctrl+c", "quit")

FULLSCREEN_HINTS: tuple[tuple[str, str], ...] = (
    ("f/esc", "exit fullscreen"),
    ("↑↓", "scroll"),
    ("l", "toggle line numbers"),
)

PANE_SELECTION_HINTS: tuple[tuple[str, str], ...] = (
    ("←→", "select pane"),
    ("enter", "focus"),
    ("esc", "back"),
)

NAVIGATOR_HINTS: tuple[tuple[str, str], ...] = (
    ("esc", "pane selection"),
    ("↑↓", "navigate"),
    ("enter", "select"),
    ("z", "back"),
)

CONTENT_HINTS: tuple[tuple[str, str], ...] = (
    ("esc", "pane selection"),
    ("↑↓", "scroll"),
    ("←", "back to navigator"),
    ("l", "toggle line numbers"),
    ("f", "fullscreen"),
)


def help_hints(state: AppState) -> tuple[tuple[str, str], ...]:
    """Return ``(key, action)`` hints for the current interaction state."""
    if state.fullscreen:
        return (QUIT_HINT, *FULLSCREEN_HINTS)
    if state.mode is Mode.PANE_SELECTION:
        return (QUIT_HINT, *PANE_SELECTION_HINTS)
    if state.focused_pane is Pane.CONTENT:
        return (QUIT_HINT, *CONTENT_HINTS)
    return (QUIT_HINT, *NAVIGATOR_HINTS)


def format_hint(key: str, action: str, theme: UITheme) -> str:
    if theme.help_key:
        key_text = f"{theme.help_key} {key} {theme.reset}"
    else:
        key_text = f"[{key}]"
    action_text = f"{theme.help_text}{action}{theme.reset}" if theme.help_text else action
    return f"{key_text}:{action_text}"


def help_line(state: AppState, theme: UITheme, width: int) -> str:
    """Return the hint row fitted to ``width`` columns."""
    hints = HINT_SEPARATOR.join(format_hint(key, action, theme) for key, action in help_hints(state))
    return fit_ansi_line(" " + hints, width)
