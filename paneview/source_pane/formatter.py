"""Content formatting policy for the viewer pane.

Markdown files go through the markdown converter; everything else is shown as
text with optional line numbers, word-wrapped to the viewport width.
"""

from __future__ import annotations

import logging

from ..ansi import word_wrap_ansi
from .markdown import DEFAULT_CODE_STYLE, render_markdown
from .text import (
    add_line_numbers,
    decode_bytes,
    expand_tabs,
    is_markdown_file,
    sanitize_terminal_text,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Select a file to view its content"


def read_error_text(exc: BaseException) -> str:
    return f"Error reading file: {exc}"


def render_content(
    raw: bytes,
    filename: str,
    show_line_numbers: bool,
    viewport_width: int,
    *,
    code_style: str = DEFAULT_CODE_STYLE,
    no_color: bool = False,
) -> str:
    """Return display text for ``raw`` file bytes.

    Never raises. Markdown conversion failures fall back to the unrendered
    text. A non-positive ``viewport_width`` disables wrapping.
    """
    text = decode_bytes(raw)
    if is_markdown_file(filename):
        try:
            return render_markdown(text, viewport_width, code_style=code_style, no_color=no_color)
        except Exception as exc:
            logger.debug("markdown rendering of %s failed, showing raw text: %s", filename, exc)
            return sanitize_terminal_text(text)

    text = expand_tabs(sanitize_terminal_text(text))
    if show_line_numbers:
        text = add_line_numbers(text)
    if viewport_width > 0:
        text = word_wrap_ansi(text, viewport_width)
    return text
