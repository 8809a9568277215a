"""Derived-state reconciliation.

Every event handler returns a state whose layout, rendered content, and
scroll positions may be stale. ``reconcile`` recomputes the layout from the
current inputs and re-renders the open file only when one of the rendering
inputs changed, so each event costs at most one layout pass and one render.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..layout import Layout, compute_layout
from ..navigator import clamp_selection, scroll_window_start
from ..source_pane import PLACEHOLDER_TEXT, clamp_offset, content_lines, render_content
from ..state import AppState

logger = logging.getLogger(__name__)


def render_key_for(state: AppState, layout: Layout) -> tuple[object, ...]:
    """Return the tuple of inputs that determine ``rendered_content``."""
    if state.current_file_path is None:
        return ("placeholder",)
    if state.read_error is not None:
        return ("error", state.current_file_path, state.read_error)
    return (
        "file",
        state.current_file_path,
        state.file_bytes,
        state.show_line_numbers,
        layout.viewport_width,
        state.code_style,
        state.no_color,
    )


def render_for(state: AppState, layout: Layout) -> str:
    if state.current_file_path is None:
        return PLACEHOLDER_TEXT
    if state.read_error is not None:
        return state.read_error
    return render_content(
        state.file_bytes or b"",
        state.current_file_path.name,
        state.show_line_numbers,
        layout.viewport_width,
        code_style=state.code_style,
        no_color=state.no_color,
    )


def reconcile(state: AppState) -> AppState:
    """Bring layout, rendered content, and scroll positions up to date."""
    layout = compute_layout(
        state.terminal_width,
        state.terminal_height,
        state.fullscreen,
        state.has_open_file,
    )
    if layout != state.layout:
        logger.debug(
            "layout: terminal %dx%d viewport %dx%d fullscreen=%s header=%s",
            layout.terminal_width,
            layout.terminal_height,
            layout.viewport_width,
            layout.viewport_height,
            layout.is_fullscreen,
            layout.has_content_header,
        )

    render_key = render_key_for(state, layout)
    rendered = state.rendered_content
    if render_key != state.render_key:
        rendered = render_for(state, layout)
        logger.debug("re-rendered content for %s at width %d", state.current_file_path, layout.viewport_width)

    offset = clamp_offset(state.content_offset, len(content_lines(rendered)), layout.viewport_height)
    selected = clamp_selection(state.selected_index, len(state.entries))
    list_start = scroll_window_start(selected, state.list_start, len(state.entries), layout.list_height)
    return replace(
        state,
        layout=layout,
        rendered_content=rendered,
        render_key=render_key,
        content_offset=offset,
        selected_index=selected,
        list_start=list_start,
    )
