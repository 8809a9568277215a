"""Vertical scrolling for the content viewport."""

from __future__ import annotations

SCROLL_LINE_KEYS: dict[str, int] = {
    "UP": -1,
    "k": -1,
    "DOWN": 1,
    "j": 1,
}
PAGE_DOWN_KEYS = frozenset({"PAGE_DOWN", " "})
PAGE_UP_KEYS = frozenset({"PAGE_UP", "b"})
HALF_PAGE_DOWN_KEYS = frozenset({"d"})
HALF_PAGE_UP_KEYS = frozenset({"u"})
TOP_KEYS = frozenset({"HOME", "g"})
BOTTOM_KEYS = frozenset({"END", "G"})


def content_lines(rendered: str) -> list[str]:
    return rendered.split("\n")


def max_offset(total_lines: int, visible_rows: int) -> int:
    return max(0, total_lines - max(1, visible_rows))


def clamp_offset(offset: int, total_lines: int, visible_rows: int) -> int:
    return max(0, min(offset, max_offset(total_lines, visible_rows)))


def handle_viewport_key(key: str, offset: int, total_lines: int, visible_rows: int) -> int | None:
    """Return the new scroll offset for ``key``, or ``None`` if not a scroll key."""
    page = max(1, visible_rows)
    if key in SCROLL_LINE_KEYS:
        delta = SCROLL_LINE_KEYS[key]
    elif key in PAGE_DOWN_KEYS:
        delta = page
    elif key in PAGE_UP_KEYS:
        delta = -page
    elif key in HALF_PAGE_DOWN_KEYS:
        delta = max(1, page // 2)
    elif key in HALF_PAGE_UP_KEYS:
        delta = -max(1, page // 2)
    elif key in TOP_KEYS:
        return 0
    elif key in BOTTOM_KEYS:
        return max_offset(total_lines, visible_rows)
    else:
        return None
    return clamp_offset(offset + delta, total_lines, visible_rows)
