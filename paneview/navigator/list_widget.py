"""Cursor and scroll-window behavior for the navigator list."""

from __future__ import annotations

LIST_KEY_DELTAS: dict[str, int] = {
    "UP": -1,
    "k": -1,
    "DOWN": 1,
    "j": 1,
}
PAGE_BACK_KEYS = frozenset({"PAGE_UP"})
PAGE_FORWARD_KEYS = frozenset({"PAGE_DOWN"})
TOP_KEYS = frozenset({"HOME", "g"})
BOTTOM_KEYS = frozenset({"END", "G"})


def clamp_selection(selected: int, count: int) -> int:
    if count <= 0:
        return 0
    return max(0, min(selected, count - 1))


def handle_list_key(key: str, selected: int, count: int, visible_rows: int) -> int | None:
    """Return the new cursor index for ``key``, or ``None`` if not a list key."""
    page = max(1, visible_rows)
    if key in LIST_KEY_DELTAS:
        return clamp_selection(selected + LIST_KEY_DELTAS[key], count)
    if key in PAGE_BACK_KEYS:
        return clamp_selection(selected - page, count)
    if key in PAGE_FORWARD_KEYS:
        return clamp_selection(selected + page, count)
    if key in TOP_KEYS:
        return 0
    if key in BOTTOM_KEYS:
        return clamp_selection(count - 1, count)
    return None


def scroll_window_start(selected: int, start: int, count: int, visible_rows: int) -> int:
    """Return the first visible row index keeping ``selected`` on screen."""
    rows = max(1, visible_rows)
    if selected < start:
        start = selected
    elif selected >= start + rows:
        start = selected - rows + 1
    return max(0, min(start, max(0, count - rows)))
