"""Plain-text shaping for the content pane.

Decoding, control-byte neutralisation, and line numbering. Everything here is
a pure string transformation.
"""

from __future__ import annotations

import re
from pathlib import PurePath

from ..ansi import TAB_STOP

MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})
LINE_NUMBER_SEPARATOR = " │ "

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")


def decode_bytes(raw: bytes) -> str:
    """Decode file bytes using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    return raw.decode("utf-8", errors="replace")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.).

    CRLF line endings become LF first; a lone carriage return is escaped like
    any other control byte since it would rewind the cursor mid-row.
    """
    source = source.replace("\r\n", "\n")
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def expand_tabs(text: str) -> str:
    return text.expandtabs(TAB_STOP)


def is_markdown_file(filename: str) -> bool:
    """Return whether ``filename`` has a markdown extension (case-insensitive)."""
    return PurePath(filename).suffix.lower() in MARKDOWN_SUFFIXES


def add_line_numbers(content: str) -> str:
    """Prefix every ``\\n``-separated line with a right-aligned line number.

    The number column is as wide as the digit count of the total line count.
    The line count is preserved exactly, including the empty final line that
    follows a trailing newline.
    """
    lines = content.split("\n")
    width = len(str(len(lines)))
    return "\n".join(
        f"{number:>{width}}{LINE_NUMBER_SEPARATOR}{line}"
        for number, line in enumerate(lines, start=1)
    )


def strip_line_numbers(numbered: str) -> str:
    """Inverse of :func:`add_line_numbers`."""
    out: list[str] = []
    for line in numbered.split("\n"):
        _, sep, body = line.partition(LINE_NUMBER_SEPARATOR)
        out.append(body if sep else line)
    return "\n".join(out)
