"""Navigator pane model: directory listing, cursor movement, back history."""

from .history import pop_directory, push_directory
from .list_widget import clamp_selection, handle_list_key, scroll_window_start
from .listing import Entry, PARENT_ENTRY_NAME, format_directory_path, list_directory

__all__ = [
    "Entry",
    "PARENT_ENTRY_NAME",
    "clamp_selection",
    "format_directory_path",
    "handle_list_key",
    "list_directory",
    "pop_directory",
    "push_directory",
    "scroll_window_start",
]
