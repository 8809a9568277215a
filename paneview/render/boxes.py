"""Bordered boxes and block joining for frame composition.

Blocks are lists of rows; every helper here returns rows whose display width
is exactly the requested outer width so blocks can be joined side by side.
Non-positive sizes produce empty or zero-width blocks instead of errors.
"""

from __future__ import annotations

from ..ansi import ansi_display_width, clip_ansi_line, fit_ansi_line

TOP_LEFT = "╭"
TOP_RIGHT = "╮"
BOTTOM_LEFT = "╰"
BOTTOM_RIGHT = "╯"
HORIZONTAL = "─"
VERTICAL = "│"
TAB_LEFT = "┤"
TAB_RIGHT = "├"


def paint(text: str, color: str, reset: str) -> str:
    if not color or not text:
        return text
    return f"{color}{text}{reset}"


def draw_box(
    lines: list[str],
    inner_width: int,
    inner_height: int,
    color: str,
    reset: str,
    *,
    padding: int = 0,
) -> list[str]:
    """Draw a rounded box around ``lines``.

    ``inner_width``/``inner_height`` exclude the border and include
    ``padding``, which is applied on all four sides.
    """
    width = max(0, inner_width)
    height = max(0, inner_height)
    text_width = max(0, width - 2 * padding)
    side = paint(VERTICAL, color, reset)
    pad = " " * min(padding, width)

    rows = [paint(TOP_LEFT + HORIZONTAL * width + TOP_RIGHT, color, reset)]
    for row in range(height):
        text_row = row - padding
        if 0 <= text_row < len(lines) and row < height - padding:
            body = fit_ansi_line(lines[text_row], text_width)
        else:
            body = " " * text_width
        inner = fit_ansi_line(f"{pad}{body}{pad}", width) if padding else body
        rows.append(f"{side}{inner}{side}")
    rows.append(paint(BOTTOM_LEFT + HORIZONTAL * width + BOTTOM_RIGHT, color, reset))
    return rows


def title_tab(title: str, color: str, reset: str) -> tuple[str, str, str]:
    """Return the three rows of a small bordered tab holding ``title``."""
    span = HORIZONTAL * (ansi_display_width(title) + 2)
    return (
        paint(TOP_LEFT + span + TOP_RIGHT, color, reset),
        paint(TAB_LEFT, color, reset) + f" {title} " + paint(TAB_RIGHT, color, reset),
        paint(BOTTOM_LEFT + span + BOTTOM_RIGHT, color, reset),
    )


def _tab_title(title: str, room: int) -> str:
    return clip_ansi_line(title, room) if room > 0 else ""


def draw_titled_box(
    title: str,
    lines: list[str],
    inner_width: int,
    body_height: int,
    color: str,
    reset: str,
    *,
    padding: int = 1,
) -> list[str]:
    """Draw a box whose top border carries a title tab.

    The tab is three rows tall: its top row sits above the box, its middle
    row is the box's top border, and its bottom row is the first row inside
    the side borders. ``body_height`` text rows follow, then the bottom border.
    """
    width = max(0, inner_width)
    # leading "──" plus the tab's own borders and padding
    title = _tab_title(title, width - 6)
    tab_top, tab_mid, tab_bottom = title_tab(title, color, reset)
    tab_width = ansi_display_width(title) + 4
    lead = 2
    tail = max(0, width - lead - tab_width)
    side = paint(VERTICAL, color, reset)

    rows = [
        fit_ansi_line(" " * (1 + lead) + tab_top, width + 2),
        fit_ansi_line(
            paint(TOP_LEFT + HORIZONTAL * lead, color, reset)
            + tab_mid
            + paint(HORIZONTAL * tail + TOP_RIGHT, color, reset),
            width + 2,
        ),
        side + fit_ansi_line(" " * lead + tab_bottom, width) + side,
    ]
    text_width = max(0, width - 2 * padding)
    pad = " " * min(padding, width)
    for row in range(max(0, body_height)):
        body = fit_ansi_line(lines[row], text_width) if row < len(lines) else " " * text_width
        rows.append(side + fit_ansi_line(f"{pad}{body}{pad}", width) + side)
    rows.append(paint(BOTTOM_LEFT + HORIZONTAL * width + BOTTOM_RIGHT, color, reset))
    return rows


def titled_rule(title: str, width: int, color: str, reset: str) -> list[str]:
    """Three-row header for fullscreen: a horizontal rule with a title tab."""
    width = max(0, width)
    title = _tab_title(title, width - 5)
    tab_top, tab_mid, tab_bottom = title_tab(title, color, reset)
    tab_width = ansi_display_width(title) + 4
    tail = max(0, width - tab_width - 1)
    return [
        fit_ansi_line(" " + tab_top, width),
        fit_ansi_line(paint(HORIZONTAL, color, reset) + tab_mid + paint(HORIZONTAL * tail, color, reset), width),
        fit_ansi_line(" " + tab_bottom, width),
    ]


def join_horizontal(blocks: list[list[str]], *, gap: int = 0) -> list[str]:
    """Place blocks side by side, top-aligned, padding shorter blocks."""
    if not blocks:
        return []
    widths = [max((ansi_display_width(row) for row in block), default=0) for block in blocks]
    height = max(len(block) for block in blocks)
    spacer = " " * max(0, gap)
    rows: list[str] = []
    for row in range(height):
        parts = [
            block[row] if row < len(block) else " " * block_width
            for block, block_width in zip(blocks, widths)
        ]
        rows.append(spacer.join(parts))
    return rows
