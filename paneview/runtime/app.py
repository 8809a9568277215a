"""Interactive session bootstrap.

Resolves the starting directory, builds the initial state, and hands control
to the event loop with the terminal in raw mode.
"""

from __future__ import annotations

import logging
import os
import sys
import termios
from dataclasses import replace
from pathlib import Path

from ..errors import RuntimeStartError
from ..input import KeyContext, open_file
from ..navigator import list_directory
from ..source_pane import DEFAULT_CODE_STYLE
from ..state import AppState, initial_state
from ..ui_theme import resolve_theme
from .loop import run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def _read_file(path: Path) -> bytes:
    return path.read_bytes()


def default_key_context() -> KeyContext:
    """Filesystem operations backed by the real disk."""
    return KeyContext(list_directory=list_directory, read_file=_read_file)


def build_start_state(
    path: Path,
    context: KeyContext,
    *,
    show_line_numbers: bool = True,
    code_style: str = DEFAULT_CODE_STYLE,
    no_color: bool = False,
) -> AppState:
    """Initial state for ``path``; a file starts open inside its parent directory."""
    target = path.resolve()
    directory = target if target.is_dir() else target.parent
    state = initial_state(
        directory,
        context.list_directory(directory),
        show_line_numbers=show_line_numbers,
        code_style=code_style,
        no_color=no_color,
    )
    if target.is_dir():
        return state

    for idx, entry in enumerate(state.entries):
        if entry.path == target:
            state = replace(state, selected_index=idx)
            break
    return open_file(state, target, context)


def run_app(
    path: Path,
    *,
    theme_name: str | None = None,
    code_style: str = DEFAULT_CODE_STYLE,
    no_color: bool = False,
    show_line_numbers: bool = True,
) -> None:
    """Run the two-pane browser on ``path`` until the user quits."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd):
        raise RuntimeStartError("stdin is not a terminal")

    context = default_key_context()
    state = build_start_state(
        path,
        context,
        show_line_numbers=show_line_numbers,
        code_style=code_style,
        no_color=no_color,
    )
    theme = resolve_theme(theme_name, no_color=no_color)
    logger.debug("starting in %s with theme %s", state.current_directory, theme.name)

    try:
        terminal = TerminalController(stdin_fd, stdout_fd)
    except (OSError, termios.error) as exc:
        raise RuntimeStartError(f"cannot configure terminal: {exc}") from exc
    run_main_loop(state, terminal, stdin_fd, context, theme)
