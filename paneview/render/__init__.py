"""View composition for the navigator/content terminal view.

``compose_frame`` turns an ``AppState`` plus a ``UITheme`` into the rows of
one screen without side effects; ``render_frame`` writes those rows to the
terminal. All sizes come from ``state.layout``.
"""

from __future__ import annotations

import os
import sys

from ..ansi import clip_ansi_line, fit_ansi_line
from ..layout import CONTENT_PADDING
from ..state import AppState, Pane
from ..ui_theme import UITheme
from .boxes import draw_box, draw_titled_box, join_horizontal, titled_rule
from .help import help_hints, help_line
from .panes import border_color, content_title, navigator_rows, viewport_rows

LOADING_TEXT = "Loading..."
# One blank column between the panes; the rest of the spacing stays free at
# the right edge so the last column is never written.
PANE_GAP = 1


def _fullscreen_rows(state: AppState, theme: UITheme) -> list[str]:
    layout = state.layout
    rows: list[str] = []
    if layout.has_content_header:
        rows.extend(titled_rule(content_title(state), layout.terminal_width, "", theme.reset))
    width = max(0, layout.viewport_width)
    rows.extend(fit_ansi_line(line, width) for line in viewport_rows(state, theme))
    return rows


def _split_rows(state: AppState, theme: UITheme) -> list[str]:
    layout = state.layout
    left_color = border_color(state, Pane.NAVIGATOR, theme)
    right_color = border_color(state, Pane.CONTENT, theme)

    left = draw_box(
        navigator_rows(state, theme),
        layout.left_pane_width,
        layout.left_pane_height,
        left_color,
        theme.reset,
    )
    if layout.has_content_header:
        right = draw_titled_box(
            content_title(state),
            viewport_rows(state, theme),
            layout.right_pane_width,
            layout.viewport_height,
            right_color,
            theme.reset,
            padding=CONTENT_PADDING,
        )
    else:
        right = draw_box(
            viewport_rows(state, theme),
            layout.right_pane_width,
            layout.right_pane_height,
            right_color,
            theme.reset,
            padding=CONTENT_PADDING,
        )
    return join_horizontal([left, right], gap=PANE_GAP)


def compose_frame(state: AppState, theme: UITheme) -> list[str]:
    """Return exactly ``terminal_height`` rows for the current state."""
    layout = state.layout
    width = layout.terminal_width
    height = layout.terminal_height
    if width <= 0 or height <= 0:
        return [LOADING_TEXT]

    rows = [help_line(state, theme, width)]
    if layout.is_fullscreen:
        rows.extend(_fullscreen_rows(state, theme))
    else:
        rows.extend(_split_rows(state, theme))
    rows = [clip_ansi_line(row, width) for row in rows[:height]]
    rows.extend("" for _ in range(height - len(rows)))
    return rows


def render_frame(rows: list[str]) -> None:
    """Write a composed frame from the top-left corner, clearing row tails."""
    out: list[str] = ["\033[H"]
    for idx, row in enumerate(rows):
        out.append(row)
        out.append("\033[0m\033[K")
        if idx < len(rows) - 1:
            out.append("\r\n")
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "LOADING_TEXT",
    "compose_frame",
    "help_hints",
    "help_line",
    "render_frame",
]
