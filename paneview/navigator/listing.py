"""Directory listing for the navigator pane.

Produces the ordered, filtered entries shown in the left pane. Listing never
raises: an unreadable directory simply yields no entries.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

PARENT_ENTRY_NAME = ".."


@dataclass(frozen=True)
class Entry:
    """One file or directory row in the navigator.

    Implements the listable-item capability consumed by the list renderer:
    ``display_name``, ``display_description``, and ``filter_key``.
    """

    name: str
    path: Path
    is_dir: bool

    def display_name(self) -> str:
        return self.name

    def display_description(self) -> str:
        return "Directory" if self.is_dir else "File"

    def filter_key(self) -> str:
        return self.name


def is_filesystem_root(directory: Path) -> bool:
    return directory.parent == directory


def list_directory(directory: Path) -> list[Entry]:
    """List visible children of ``directory``: directories first, then files.

    Hidden names (leading dot) are skipped. Unless ``directory`` is the
    filesystem root, a synthetic ``..`` entry pointing at the parent comes
    first. Any scan failure returns an empty list.
    """
    try:
        with os.scandir(directory) as scanned:
            children: list[Entry] = []
            for child in scanned:
                if child.name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                children.append(Entry(child.name, directory / child.name, is_dir))
    except OSError as exc:
        logger.debug("listing %s failed: %s", directory, exc)
        return []

    children.sort(key=lambda entry: (not entry.is_dir, entry.name))
    entries: list[Entry] = []
    if not is_filesystem_root(directory):
        entries.append(Entry(PARENT_ENTRY_NAME, directory.parent, True))
    entries.extend(children)
    return entries


def format_directory_path(path: Path) -> str:
    """Return ``path`` with a leading home directory shown as ``~``."""
    text = str(path)
    try:
        home_path = Path.home()
    except RuntimeError:
        return text
    if is_filesystem_root(home_path):
        return text
    home = str(home_path)
    if home and (text == home or text.startswith(home.rstrip(os.sep) + os.sep)):
        return "~" + text[len(home):]
    return text
