"""ANSI-aware text measurement and line shaping utilities.

Provides clipping, padding, and wrapping that preserve escape sequences.
These helpers keep pane borders aligned when color codes and wide chars are
present in rendered content.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\033[0m"


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def ansi_display_width(text: str) -> int:
    """Return display width after removing ANSI escape sequences."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            if col + w > max_cols:
                break
            out.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip or right-pad ``text`` so it occupies exactly ``width`` columns.

    A reset is appended after styled text so padding and whatever follows on
    the same row are not painted with a leaked color.
    """
    if width <= 0:
        return ""
    clipped = clip_ansi_line(text, width)
    pad = width - ansi_display_width(clipped)
    if "\x1b" in clipped:
        clipped += RESET
    return clipped + " " * max(0, pad)


def wrap_ansi_line(text: str, width: int) -> list[str]:
    """Hard-wrap a styled line into chunks that fit ``width`` display columns.

    Escape sequences remain attached to their surrounding chunk, and tab
    expansion respects terminal tab-stop alignment for each wrapped segment.
    """
    if width <= 0:
        return [""]
    if not text:
        return [""]

    wrapped: list[str] = []
    chunk: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                chunk.append(match.group(0))
                i = match.end()
                continue

        if col >= width:
            wrapped.append("".join(chunk))
            chunk = []
            col = 0

        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            if col + w > width and chunk:
                wrapped.append("".join(chunk))
                chunk = []
                col = 0
                w = TAB_STOP
            chunk.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > width and chunk:
            wrapped.append("".join(chunk))
            chunk = []
            col = 0
        chunk.append(ch)
        col += char_display_width(ch, col)
        i += 1

    wrapped.append("".join(chunk))
    return wrapped


@dataclass
class _WrapToken:
    parts: list[str] = field(default_factory=list)
    width: int = 0
    is_space: bool = False

    def text(self) -> str:
        return "".join(self.parts)

    def escapes(self) -> list[str]:
        return [part for part in self.parts if part.startswith("\x1b")]


def _tokenize_for_wrap(text: str) -> list[_WrapToken]:
    """Split a line into alternating word and whitespace tokens.

    Escape sequences ride along with the token being built so that styling is
    never separated from the text it applies to.
    """
    tokens: list[_WrapToken] = []
    pending_escapes: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                if tokens:
                    tokens[-1].parts.append(match.group(0))
                else:
                    pending_escapes.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        is_space = ch in {" ", "\t"}
        if not tokens or tokens[-1].is_space != is_space:
            tokens.append(_WrapToken(parts=pending_escapes, is_space=is_space))
            pending_escapes = []
        tokens[-1].parts.append(ch)
        tokens[-1].width += char_display_width(ch, 0)
        i += 1
    if pending_escapes:
        tokens.append(_WrapToken(parts=pending_escapes))
    return tokens


def word_wrap_ansi_line(text: str, width: int) -> list[str]:
    """Wrap one styled line at word boundaries to ``width`` columns.

    Whitespace at a break point is dropped (its escape sequences are kept).
    Words wider than ``width`` are hard-split with :func:`wrap_ansi_line`.
    Tabs count as a full tab stop; callers expand them beforehand when exact
    alignment matters.
    """
    if width <= 0 or ansi_display_width(text) <= width:
        return [text]

    lines: list[str] = []
    current: list[str] = []
    col = 0
    for token in _tokenize_for_wrap(text):
        if token.width == 0:
            current.extend(token.parts)
            continue
        if token.is_space:
            if col + token.width <= width:
                current.append(token.text())
                col += token.width
            else:
                current.extend(token.escapes())
                lines.append("".join(current))
                current = []
                col = 0
            continue
        if col + token.width > width and col > 0:
            while current and not current[-1].startswith("\x1b") and not current[-1].strip():
                current.pop()
            lines.append("".join(current))
            current = []
            col = 0
        if token.width > width:
            chunks = wrap_ansi_line(token.text(), width)
            lines.extend(chunks[:-1])
            current = [chunks[-1]]
            col = ansi_display_width(chunks[-1])
            continue
        current.append(token.text())
        col += token.width
    if current or not lines:
        lines.append("".join(current))
    return lines


def word_wrap_ansi(text: str, width: int) -> str:
    """Word-wrap every ``\\n``-separated line of ``text`` to ``width`` columns.

    Existing line breaks are kept; a non-positive width returns ``text``
    unchanged.
    """
    if width <= 0:
        return text
    out: list[str] = []
    for line in text.split("\n"):
        out.extend(word_wrap_ansi_line(line, width))
    return "\n".join(out)
