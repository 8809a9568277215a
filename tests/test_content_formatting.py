"""Content formatter tests.

Covers line numbering, decoding and control-byte neutralisation, wrapping,
markdown conversion with its raw-text fallback, and idempotence.
"""

from __future__ import annotations

import unittest
from unittest import mock

from paneview.source_pane import (
    add_line_numbers,
    decode_bytes,
    is_markdown_file,
    read_error_text,
    render_content,
    sanitize_terminal_text,
    strip_line_numbers,
)


class LineNumberTests(unittest.TestCase):
    def test_numbers_are_right_aligned_to_line_count_digits(self) -> None:
        self.assertEqual(add_line_numbers("a\nb"), "1 │ a\n2 │ b")
        numbered = add_line_numbers("\n".join(str(n) for n in range(10))).split("\n")
        self.assertEqual(numbered[0], " 1 │ 0")
        self.assertEqual(numbered[9], "10 │ 9")

    def test_trailing_newline_keeps_line_count(self) -> None:
        numbered = add_line_numbers("a\n")
        self.assertEqual(numbered, "1 │ a\n2 │ ")
        self.assertEqual(len(numbered.split("\n")), 2)

    def test_strip_round_trips(self) -> None:
        samples = ["", "one", "a\nb\n", "x │ y\nz", "\n\n\n", "\t tabbed\n" * 12]
        for sample in samples:
            self.assertEqual(strip_line_numbers(add_line_numbers(sample)), sample, msg=repr(sample))


class TextShapingTests(unittest.TestCase):
    def test_decode_falls_back_to_latin1(self) -> None:
        self.assertEqual(decode_bytes("héllo".encode("utf-8")), "héllo")
        self.assertEqual(decode_bytes(b"caf\xe9"), "café")

    def test_control_bytes_are_escaped_and_crlf_normalised(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\x07b\r\nc\td"), "a\\x07b\nc\td")
        self.assertEqual(sanitize_terminal_text("\x1b[2J"), "\\x1b[2J")

    def test_markdown_detection_is_case_insensitive(self) -> None:
        self.assertTrue(is_markdown_file("README.md"))
        self.assertTrue(is_markdown_file("notes.MARKDOWN"))
        self.assertFalse(is_markdown_file("main.py"))
        self.assertFalse(is_markdown_file("md"))

    def test_read_error_text(self) -> None:
        text = read_error_text(PermissionError(13, "Permission denied"))
        self.assertTrue(text.startswith("Error reading file: "))
        self.assertIn("Permission denied", text)


class RenderContentTests(unittest.TestCase):
    def test_plain_text_without_line_numbers_or_wrapping(self) -> None:
        self.assertEqual(render_content(b"hello\nworld", "a.txt", False, 0), "hello\nworld")

    def test_tabs_are_expanded(self) -> None:
        self.assertEqual(render_content(b"x\ty", "a.py", False, 0), "x       y")

    def test_line_numbers_are_applied_before_wrapping(self) -> None:
        rendered = render_content(b"aaaa bbbb\ncc", "a.txt", True, 8)
        self.assertEqual(rendered, "1 │ aaaa\nbbbb\n2 │ cc")

    def test_wraps_at_word_boundaries(self) -> None:
        self.assertEqual(render_content(b"aaaa bbbb", "t.txt", False, 4), "aaaa\nbbbb")

    def test_non_positive_width_skips_wrapping(self) -> None:
        long_line = b"word " * 40
        self.assertEqual(render_content(long_line, "t.txt", False, 0), long_line.decode())
        self.assertEqual(render_content(long_line, "t.txt", False, -2), long_line.decode())

    def test_plain_text_is_idempotent(self) -> None:
        raw = b"first line here\n\tsecond\x07line\n" * 5
        first = render_content(raw, "x.c", True, 17)
        second = render_content(raw, "x.c", True, 17)
        self.assertEqual(first, second)

    def test_markdown_is_rendered_and_idempotent(self) -> None:
        raw = b"# Title\n\nSome **bold** text.\n\n```python\nprint('hi')\n```\n"
        first = render_content(raw, "README.md", True, 40, no_color=True)
        second = render_content(raw, "README.md", True, 40, no_color=True)

        self.assertEqual(first, second)
        self.assertIn("Title", first)
        self.assertIn("bold", first)
        self.assertNotIn("**", first)
        self.assertNotIn("\x1b", first)

    def test_colored_markdown_is_idempotent(self) -> None:
        raw = b"Intro [link](https://example.com)\n\n```python\nx = 1\n```\n"
        self.assertEqual(
            render_content(raw, "doc.md", False, 30, code_style="monokai"),
            render_content(raw, "doc.md", False, 30, code_style="monokai"),
        )

    def test_markdown_failure_falls_back_to_raw_text(self) -> None:
        with mock.patch("paneview.source_pane.formatter.render_markdown", side_effect=RuntimeError("boom")):
            rendered = render_content(b"# Title\r\nbody", "README.md", True, 40)
        self.assertEqual(rendered, "# Title\nbody")

    def test_markdown_with_non_positive_width_is_rendered_unwrapped(self) -> None:
        sentence = " ".join(f"word{n}" for n in range(60))
        raw = f"# Title\n\n**bold** {sentence}\nsecond line\n".encode()
        for width in (0, -3):
            rendered = render_content(raw, "README.md", True, width, no_color=True)
            lines = rendered.split("\n")
            self.assertNotIn("**", rendered)
            self.assertNotIn("# Title", rendered)
            self.assertTrue(any(f"bold {sentence} second line" in line for line in lines))
            self.assertTrue(all(line == line.rstrip() for line in lines))

    def test_unwrapped_colored_markdown_keeps_reset_after_stripping_pad(self) -> None:
        rendered = render_content(b"**bold** text\n", "a.md", False, 0)
        self.assertIn("bold", rendered)
        for line in rendered.split("\n"):
            self.assertFalse(line.endswith(" "))


if __name__ == "__main__":
    unittest.main()
