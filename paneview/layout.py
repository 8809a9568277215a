"""Layout policy and geometry for the split navigator/content view.

All pane, list, and viewport dimensions are derived here from the terminal
size and two flags (fullscreen, content header present). The function is
pure and total: degenerate terminal sizes produce zero or negative fields,
which renderers tolerate by clamping at the point of use.
"""

from __future__ import annotations

from dataclasses import dataclass

# Pane sizing
MAX_LEFT_PANE_WIDTH = 40
PANE_SPACING = 2

# Border and padding
BORDER_WIDTH = 2
PANE_PADDING = 2
CONTENT_PADDING = 1

# Heights
HELP_TEXT_HEIGHT = 1
CONTENT_HEADER_HEIGHT = 3
LIST_TITLE_HEIGHT = 2

# Columns left free in fullscreen for terminal-edge artifacts
FULLSCREEN_BUFFER = 4


@dataclass(frozen=True)
class Layout:
    """Every derived dimension for one frame.

    ``left_pane_*`` and ``right_pane_*`` are inner sizes (inside the border);
    ``list_*`` and ``viewport_*`` are the text regions inside those panes.
    """

    terminal_width: int = 0
    terminal_height: int = 0
    left_pane_width: int = 0
    left_pane_height: int = 0
    right_pane_width: int = 0
    right_pane_height: int = 0
    viewport_width: int = 0
    viewport_height: int = 0
    list_width: int = 0
    list_height: int = 0
    is_fullscreen: bool = False
    has_content_header: bool = False


def left_pane_rendered_width(terminal_width: int) -> int:
    """Return the navigator width including its border."""
    return min(MAX_LEFT_PANE_WIDTH, terminal_width // 4)


def compute_layout(
    terminal_width: int,
    terminal_height: int,
    fullscreen: bool,
    has_content_header: bool,
    *,
    help_band_height: int = HELP_TEXT_HEIGHT,
) -> Layout:
    """Compute all layout dimensions for the given terminal size and flags."""
    if fullscreen:
        viewport_height = terminal_height - help_band_height
        if has_content_header:
            viewport_height -= CONTENT_HEADER_HEIGHT
        return Layout(
            terminal_width=terminal_width,
            terminal_height=terminal_height,
            viewport_width=terminal_width - FULLSCREEN_BUFFER,
            viewport_height=viewport_height,
            is_fullscreen=True,
            has_content_header=has_content_header,
        )

    available_height = terminal_height - help_band_height
    left_rendered = left_pane_rendered_width(terminal_width)
    left_pane_width = left_rendered - BORDER_WIDTH
    left_pane_height = available_height - BORDER_WIDTH
    right_pane_width = terminal_width - left_rendered - PANE_SPACING - BORDER_WIDTH
    right_pane_height = available_height - BORDER_WIDTH

    if has_content_header:
        # The header's lower row sits inside the side borders, so only two of
        # its three rows replace the top border.
        viewport_height = right_pane_height - CONTENT_HEADER_HEIGHT + 1
    else:
        viewport_height = right_pane_height - 2 * CONTENT_PADDING

    return Layout(
        terminal_width=terminal_width,
        terminal_height=terminal_height,
        left_pane_width=left_pane_width,
        left_pane_height=left_pane_height,
        right_pane_width=right_pane_width,
        right_pane_height=right_pane_height,
        viewport_width=right_pane_width - PANE_PADDING,
        viewport_height=viewport_height,
        list_width=left_pane_width,
        list_height=left_pane_height - LIST_TITLE_HEIGHT,
        is_fullscreen=False,
        has_content_header=has_content_header,
    )


__all__ = [
    "BORDER_WIDTH",
    "CONTENT_HEADER_HEIGHT",
    "CONTENT_PADDING",
    "FULLSCREEN_BUFFER",
    "HELP_TEXT_HEIGHT",
    "LIST_TITLE_HEIGHT",
    "Layout",
    "MAX_LEFT_PANE_WIDTH",
    "PANE_PADDING",
    "PANE_SPACING",
    "compute_layout",
    "left_pane_rendered_width",
]
