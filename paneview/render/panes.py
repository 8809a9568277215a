"""Row builders for the navigator and content panes."""

from __future__ import annotations

from ..ansi import ansi_display_width, fit_ansi_line
from ..navigator import Entry, format_directory_path
from ..source_pane import content_lines
from ..state import AppState, Mode, Pane
from ..ui_theme import UITheme

SELECTED_MARKER = "> "
UNSELECTED_MARKER = "  "


def border_color(state: AppState, pane: Pane, theme: UITheme) -> str:
    """Selected (pane-selection highlight) beats focused, which beats idle."""
    if state.mode is Mode.PANE_SELECTION and state.selected_pane is pane:
        return theme.border_selected
    if state.mode is Mode.NORMAL and state.focused_pane is pane:
        return theme.border_focused
    return theme.border_unfocused


def format_entry(entry: Entry, selected: bool, width: int, theme: UITheme) -> str:
    """Render one navigator row: marker, name, and a right-aligned description."""
    marker = SELECTED_MARKER if selected else UNSELECTED_MARKER
    name = entry.display_name() + ("/" if entry.is_dir and entry.name != ".." else "")
    if selected:
        color = theme.list_selected
    elif entry.is_dir:
        color = theme.list_dir
    else:
        color = theme.list_file
    name_text = f"{color}{name}{theme.reset}" if color else name
    row = marker + name_text

    description = entry.display_description()
    gap = width - ansi_display_width(row) - len(description)
    if gap >= 2:
        desc_text = f"{theme.list_description}{description}{theme.reset}" if theme.list_description else description
        row = row + " " * gap + desc_text
    return fit_ansi_line(row, width)


def navigator_rows(state: AppState, theme: UITheme) -> list[str]:
    """Title, separator, then the visible window of entries."""
    layout = state.layout
    width = max(0, layout.list_width)
    title = f" {format_directory_path(state.current_directory)} "
    if theme.list_title:
        title = f"{theme.list_title}{title}{theme.reset}"
    rows = [fit_ansi_line(title, width), ""]
    for row in range(max(0, layout.list_height)):
        idx = state.list_start + row
        if idx >= len(state.entries):
            break
        rows.append(format_entry(state.entries[idx], idx == state.selected_index, width, theme))
    return rows


def viewport_rows(state: AppState, theme: UITheme) -> list[str]:
    """Visible slice of the rendered content."""
    height = max(0, state.layout.viewport_height)
    if state.current_file_path is None:
        color = theme.placeholder
    elif state.read_error is not None:
        color = theme.error
    else:
        color = ""
    lines = content_lines(state.rendered_content)[state.content_offset:state.content_offset + height]
    if color:
        lines = [f"{color}{line}{theme.reset}" for line in lines]
    return lines


def content_title(state: AppState) -> str:
    if state.current_file_path is None:
        return ""
    return format_directory_path(state.current_file_path)
