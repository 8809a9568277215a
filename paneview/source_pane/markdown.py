"""Markdown to ANSI text conversion backed by rich.

The converter is treated as an opaque formatting function: callers pass
source text and a wrap width and get terminal text back, or an exception.
"""

from __future__ import annotations

import io
import re

from rich.cells import cell_len
from rich.console import Console
from rich.markdown import Markdown

from ..ansi import RESET

DEFAULT_CODE_STYLE = "monokai"

# Room for list bullets, quote bars and code block padding around a block.
UNWRAPPED_MARGIN = 16

_TRAILING_PAD_RE = re.compile(r"(?: |\x1b\[[0-9;]*m)+$")


def build_markdown_console(width: int, *, no_color: bool = False) -> tuple[Console, io.StringIO]:
    """Create a string-backed console that wraps at ``width`` columns."""
    if width <= 0:
        raise ValueError(f"markdown wrap width must be positive, got {width}")
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        force_terminal=not no_color,
        no_color=no_color,
        color_system=None if no_color else "256",
        highlight=False,
        emoji=False,
        legacy_windows=False,
    )
    return console, buffer


def unwrapped_width(source: str) -> int:
    """Console width wide enough that no block of ``source`` needs wrapping."""
    widest = 1
    for block in re.split(r"\n\s*\n", source):
        lines = block.splitlines()
        # Soft line breaks join into one paragraph line.
        widest = max(widest, cell_len(" ".join(line.strip() for line in lines)))
        widest = max([widest, *(cell_len(line) for line in lines)])
    return widest + UNWRAPPED_MARGIN


def strip_trailing_pad(text: str) -> str:
    """Drop the spaces rich pads each line with, keeping the colour reset."""
    lines = []
    for line in text.split("\n"):
        match = _TRAILING_PAD_RE.search(line)
        if match is not None:
            had_escape = "\x1b" in match.group(0)
            line = line[: match.start()] + (RESET if had_escape else "")
        lines.append(line)
    return "\n".join(lines)


def render_markdown(
    source: str,
    width: int,
    *,
    code_style: str = DEFAULT_CODE_STYLE,
    no_color: bool = False,
) -> str:
    """Render markdown ``source`` to ANSI text wrapped at ``width`` columns.

    A ``width`` of 0 or less means no wrapping: the document is laid out wide
    enough for its longest block and the trailing pad is stripped.

    Output depends only on the arguments. Hyperlinks stay disabled since rich
    tags each OSC-8 link with a random id.
    """
    wrap = width > 0
    console, buffer = build_markdown_console(width if wrap else unwrapped_width(source), no_color=no_color)
    console.print(Markdown(source, code_theme=code_style, hyperlinks=False))
    if wrap:
        return buffer.getvalue()
    return strip_trailing_pad(buffer.getvalue())
