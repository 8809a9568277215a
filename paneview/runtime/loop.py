"""Main interactive event loop for the terminal UI.

Turns terminal size changes and key presses into events, steps the state,
and redraws whenever the state changed. Feature logic lives in ``step``.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KeyContext, read_key
from ..render import compose_frame, render_frame
from ..state import AppState
from ..ui_theme import UITheme
from .events import KeyPress, Resize, step
from .terminal import TerminalController

logger = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 120


@dataclass(frozen=True)
class RuntimeLoopIO:
    """Terminal operations used by ``run_main_loop``; tests inject fakes."""

    get_terminal_size: Callable[[tuple[int, int]], object] = shutil.get_terminal_size
    read_key: Callable[..., str] = read_key
    draw: Callable[[list[str]], None] = render_frame


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    context: KeyContext,
    theme: UITheme,
    io: RuntimeLoopIO | None = None,
) -> AppState:
    """Run the interactive loop until a quit key arrives.

    Returns the last state, which is handy for tests and debug logging.
    """
    ops = io or RuntimeLoopIO()
    last_frame: AppState | None = None

    with terminal.raw_mode():
        while True:
            term = ops.get_terminal_size((80, 24))
            if (term.columns, term.lines) != (state.terminal_width, state.terminal_height):
                logger.debug("terminal resized to %dx%d", term.columns, term.lines)
                state, _ = step(state, Resize(term.columns, term.lines), context)

            if state is not last_frame:
                ops.draw(compose_frame(state, theme))
                last_frame = state

            key = ops.read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            if not key:
                continue
            state, should_quit = step(state, KeyPress(key), context)
            if should_quit:
                logger.debug("quit requested with %r", key)
                return state
