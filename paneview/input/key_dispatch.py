"""Mode and focus state machine for keyboard input.

Decides which pane owns a key press. Normal mode routes keys to the focused
pane after checking the global bindings; pane-selection mode only moves the
selection highlight between panes. Handlers return a new ``AppState`` and
leave layout and content rendering to the reconciler.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from ..navigator import Entry, handle_list_key, pop_directory, push_directory
from ..source_pane import PLACEHOLDER_TEXT, content_lines, handle_viewport_key, read_error_text
from ..state import AppState, Mode, Pane

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "CTRL_C"})


@dataclass(frozen=True)
class KeyContext:
    """Filesystem operations the key handlers are allowed to perform."""

    list_directory: Callable[[Path], list[Entry]]
    read_file: Callable[[Path], bytes]


def handle_key(state: AppState, key: str, context: KeyContext) -> tuple[AppState, bool]:
    """Apply one key press and return ``(new_state, should_quit)``."""
    if key in QUIT_KEYS:
        return state, True
    if state.mode is Mode.PANE_SELECTION:
        return handle_pane_selection_key(state, key), False
    if state.fullscreen:
        return handle_fullscreen_key(state, key), False
    return handle_normal_key(state, key, context), False


def handle_pane_selection_key(state: AppState, key: str) -> AppState:
    if key == "ESC":
        return replace(state, mode=Mode.NORMAL)
    if key == "LEFT":
        return replace(state, selected_pane=Pane.NAVIGATOR)
    if key == "RIGHT":
        return replace(state, selected_pane=Pane.CONTENT)
    if key == "ENTER":
        return replace(state, mode=Mode.NORMAL, focused_pane=state.selected_pane)
    return state


def handle_fullscreen_key(state: AppState, key: str) -> AppState:
    if key in {"ESC", "f"}:
        logger.debug("leaving fullscreen")
        return replace(state, fullscreen=False)
    if key == "l":
        return toggle_line_numbers(state)
    return scroll_content(state, key)


def handle_normal_key(state: AppState, key: str, context: KeyContext) -> AppState:
    content_focused = state.focused_pane is Pane.CONTENT

    if key == "ESC":
        return replace(state, mode=Mode.PANE_SELECTION, selected_pane=state.focused_pane)
    if key == "LEFT":
        if content_focused:
            return replace(state, focused_pane=Pane.NAVIGATOR)
        return state
    if key == "l":
        return toggle_line_numbers(state) if content_focused else state
    if key == "f":
        if content_focused:
            logger.debug("entering fullscreen")
            return replace(state, fullscreen=True)
        return state
    if key == "z":
        return go_back(state, context) if not content_focused else state
    if key == "ENTER":
        return open_selected_entry(state, context) if not content_focused else state

    if content_focused:
        return scroll_content(state, key)
    return move_cursor(state, key)


def toggle_line_numbers(state: AppState) -> AppState:
    return replace(state, show_line_numbers=not state.show_line_numbers)


def scroll_content(state: AppState, key: str) -> AppState:
    offset = handle_viewport_key(
        key,
        state.content_offset,
        len(content_lines(state.rendered_content)),
        state.layout.viewport_height,
    )
    if offset is None:
        return state
    return replace(state, content_offset=offset)


def move_cursor(state: AppState, key: str) -> AppState:
    selected = handle_list_key(key, state.selected_index, len(state.entries), state.layout.list_height)
    if selected is None:
        return state
    return replace(state, selected_index=selected)


def _enter_directory(
    state: AppState,
    directory: Path,
    history: tuple[Path, ...],
    context: KeyContext,
) -> AppState:
    """Switch the navigator to ``directory`` and close any open file."""
    logger.debug("changing directory to %s", directory)
    return replace(
        state,
        current_directory=directory,
        entries=tuple(context.list_directory(directory)),
        selected_index=0,
        list_start=0,
        history=history,
        current_file_path=None,
        file_bytes=None,
        read_error=None,
        rendered_content=PLACEHOLDER_TEXT,
        content_offset=0,
    )


def open_selected_entry(state: AppState, context: KeyContext) -> AppState:
    """Descend into the selected directory or open the selected file."""
    entry = state.selected_entry()
    if entry is None:
        return state

    if entry.is_dir:
        history = push_directory(state.history, state.current_directory)
        return _enter_directory(state, entry.path, history, context)

    return open_file(state, entry.path, context)


def open_file(state: AppState, path: Path, context: KeyContext) -> AppState:
    """Load ``path`` into the content pane and give it focus.

    A failed read is kept as error text instead of raising.
    """
    logger.debug("opening %s", path)
    try:
        file_bytes: bytes | None = context.read_file(path)
        read_error = None
    except OSError as exc:
        logger.debug("reading %s failed: %s", path, exc)
        file_bytes = None
        read_error = read_error_text(exc)
    return replace(
        state,
        current_file_path=path,
        file_bytes=file_bytes,
        read_error=read_error,
        content_offset=0,
        focused_pane=Pane.CONTENT,
    )


def go_back(state: AppState, context: KeyContext) -> AppState:
    """Return to the previously visited directory, if any."""
    history, previous = pop_directory(state.history)
    if previous is None:
        return state
    return _enter_directory(state, previous, history, context)


__all__ = [
    "KeyContext",
    "QUIT_KEYS",
    "go_back",
    "handle_fullscreen_key",
    "handle_key",
    "handle_normal_key",
    "handle_pane_selection_key",
    "open_file",
    "open_selected_entry",
    "toggle_line_numbers",
]
