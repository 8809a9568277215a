"""Application state aggregate.

``AppState`` is immutable: event handlers return a new instance built with
:func:`dataclasses.replace`, and the reconciler fills in the derived fields
(layout, rendered content, scroll clamps) once per event.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from .layout import Layout
from .navigator import Entry
from .source_pane import DEFAULT_CODE_STYLE, PLACEHOLDER_TEXT


class Mode(enum.Enum):
    NORMAL = "normal"
    PANE_SELECTION = "pane_selection"


class Pane(enum.Enum):
    NAVIGATOR = "navigator"
    CONTENT = "content"


@dataclass(frozen=True)
class AppState:
    current_directory: Path
    entries: tuple[Entry, ...] = ()
    selected_index: int = 0
    list_start: int = 0
    history: tuple[Path, ...] = ()
    current_file_path: Path | None = None
    file_bytes: bytes | None = None
    read_error: str | None = None
    rendered_content: str = PLACEHOLDER_TEXT
    content_offset: int = 0
    show_line_numbers: bool = True
    fullscreen: bool = False
    mode: Mode = Mode.NORMAL
    focused_pane: Pane = Pane.NAVIGATOR
    selected_pane: Pane = Pane.NAVIGATOR
    terminal_width: int = 0
    terminal_height: int = 0
    layout: Layout = Layout()
    render_key: tuple[object, ...] | None = None
    code_style: str = DEFAULT_CODE_STYLE
    no_color: bool = False

    @property
    def has_open_file(self) -> bool:
        return self.current_file_path is not None

    def selected_entry(self) -> Entry | None:
        if 0 <= self.selected_index < len(self.entries):
            return self.entries[self.selected_index]
        return None


def initial_state(
    directory: Path,
    entries: list[Entry],
    *,
    show_line_numbers: bool = True,
    code_style: str = DEFAULT_CODE_STYLE,
    no_color: bool = False,
) -> AppState:
    """Build the startup state: Normal mode, navigator focus, no open file."""
    return AppState(
        current_directory=directory,
        entries=tuple(entries),
        show_line_numbers=show_line_numbers,
        code_style=code_style,
        no_color=no_color,
    )


__all__ = ["AppState", "Mode", "Pane", "initial_state"]
