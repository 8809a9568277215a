"""Content pane: text shaping, markdown conversion, and viewport scrolling."""

from .formatter import PLACEHOLDER_TEXT, read_error_text, render_content
from .markdown import DEFAULT_CODE_STYLE, render_markdown
from .text import add_line_numbers, decode_bytes, is_markdown_file, sanitize_terminal_text, strip_line_numbers
from .viewport import clamp_offset, content_lines, handle_viewport_key

__all__ = [
    "DEFAULT_CODE_STYLE",
    "PLACEHOLDER_TEXT",
    "add_line_numbers",
    "clamp_offset",
    "content_lines",
    "decode_bytes",
    "handle_viewport_key",
    "is_markdown_file",
    "read_error_text",
    "render_content",
    "render_markdown",
    "sanitize_terminal_text",
    "strip_line_numbers",
]
