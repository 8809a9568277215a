"""Frame composition tests.

Every composed frame must fill the terminal height exactly and never exceed
its width; border colors must follow focus and pane selection.
"""

from __future__ import annotations

import unittest
from dataclasses import replace
from pathlib import Path
from unittest import mock

from paneview.ansi import ansi_display_width, strip_ansi
from paneview.navigator import Entry
from paneview.render import LOADING_TEXT, compose_frame, render_frame
from paneview.render.boxes import draw_box, draw_titled_box, join_horizontal
from paneview.render.help import help_hints, help_line
from paneview.render.panes import border_color
from paneview.runtime.reconcile import reconcile
from paneview.source_pane import PLACEHOLDER_TEXT
from paneview.state import Mode, Pane, initial_state
from paneview.ui_theme import DEFAULT_THEME, PLAIN_THEME

FILE = Path("/proj/readme.txt")
ENTRIES = [
    Entry("..", Path("/"), True),
    Entry("src", Path("/proj/src"), True),
    Entry("readme.txt", FILE, False),
]


def _state(width: int, height: int, **changes):
    state = initial_state(Path("/proj"), ENTRIES)
    return reconcile(replace(state, terminal_width=width, terminal_height=height, **changes))


def _open(width: int, height: int, **changes):
    return _state(
        width,
        height,
        current_file_path=FILE,
        file_bytes=b"hello \xe4\xb8\x96\xe7\x95\x8c wide text\n" * 60,
        focused_pane=Pane.CONTENT,
        **changes,
    )


class FrameShapeTests(unittest.TestCase):
    def assertFrameFits(self, frame: list[str], width: int, height: int) -> None:
        self.assertEqual(len(frame), height)
        for row in frame:
            self.assertLessEqual(ansi_display_width(row), width, msg=repr(row))

    def test_split_frames_fit_terminal(self) -> None:
        for width, height in ((80, 24), (120, 40), (33, 9), (200, 60)):
            self.assertFrameFits(compose_frame(_state(width, height), DEFAULT_THEME), width, height)
            self.assertFrameFits(compose_frame(_open(width, height), DEFAULT_THEME), width, height)

    def test_fullscreen_frames_fit_terminal(self) -> None:
        for width, height in ((80, 24), (41, 12)):
            frame = compose_frame(_open(width, height, fullscreen=True), DEFAULT_THEME)
            self.assertFrameFits(frame, width, height)

    def test_tiny_terminals_do_not_raise(self) -> None:
        for width in range(1, 12):
            for height in range(1, 8):
                self.assertFrameFits(compose_frame(_open(width, height), PLAIN_THEME), width, height)
                self.assertFrameFits(compose_frame(_state(width, height), PLAIN_THEME), width, height)

    def test_unknown_size_shows_loading(self) -> None:
        self.assertEqual(compose_frame(_state(0, 0), DEFAULT_THEME), [LOADING_TEXT])


class FrameContentTests(unittest.TestCase):
    def test_placeholder_and_entries_are_visible(self) -> None:
        text = "\n".join(strip_ansi(row) for row in compose_frame(_state(100, 20), DEFAULT_THEME))
        self.assertIn(PLACEHOLDER_TEXT, text)
        self.assertIn("> ..", text)
        self.assertIn("src/", text)
        self.assertIn("readme.txt", text)
        self.assertIn("Directory", text)

    def test_open_file_shows_title_and_content(self) -> None:
        text = "\n".join(strip_ansi(row) for row in compose_frame(_open(100, 20), DEFAULT_THEME))
        self.assertIn("/proj/readme.txt", text)
        self.assertIn("1 │ hello", text)

    def test_help_line_comes_first_and_tracks_state(self) -> None:
        frame = compose_frame(_state(120, 20), PLAIN_THEME)
        self.assertIn("[q/ctrl+c]:quit", frame[0])
        self.assertIn("[z]:back", frame[0])

        content = strip_ansi(help_line(_open(160, 20), DEFAULT_THEME, 160))
        self.assertIn("fullscreen", content)
        fullscreen = strip_ansi(help_line(_open(160, 20, fullscreen=True), DEFAULT_THEME, 160))
        self.assertIn("exit fullscreen", fullscreen)

    def test_content_hints_include_fullscreen_even_when_row_is_clipped(self) -> None:
        state = _open(120, 20)
        self.assertIn(("f", "fullscreen"), help_hints(state))
        self.assertEqual(ansi_display_width(help_line(state, DEFAULT_THEME, 120)), 120)


class BorderColorTests(unittest.TestCase):
    def test_focused_pane_is_highlighted_in_normal_mode(self) -> None:
        state = _state(80, 24)
        self.assertEqual(border_color(state, Pane.NAVIGATOR, DEFAULT_THEME), DEFAULT_THEME.border_focused)
        self.assertEqual(border_color(state, Pane.CONTENT, DEFAULT_THEME), DEFAULT_THEME.border_unfocused)

    def test_selected_pane_wins_during_pane_selection(self) -> None:
        state = _state(80, 24, mode=Mode.PANE_SELECTION, selected_pane=Pane.CONTENT)
        self.assertEqual(border_color(state, Pane.CONTENT, DEFAULT_THEME), DEFAULT_THEME.border_selected)
        self.assertEqual(border_color(state, Pane.NAVIGATOR, DEFAULT_THEME), DEFAULT_THEME.border_unfocused)

        frame = "".join(compose_frame(state, DEFAULT_THEME))
        self.assertIn(DEFAULT_THEME.border_selected, frame)
        self.assertNotIn(DEFAULT_THEME.border_focused, frame)


class BoxTests(unittest.TestCase):
    def test_draw_box_has_exact_outer_size(self) -> None:
        rows = draw_box(["abc"], 6, 3, "", "", padding=1)
        self.assertEqual(rows, ["╭──────╮", "│      │", "│ abc  │", "│      │", "╰──────╯"])

    def test_titled_box_rows(self) -> None:
        rows = draw_titled_box("t", ["x"], 10, 2, "", "")
        self.assertEqual(len(rows), 3 + 2 + 1)
        self.assertTrue(all(ansi_display_width(row) == 12 for row in rows))
        self.assertEqual(rows[1], "╭──┤ t ├───╮")
        self.assertEqual(rows[3], "│ x        │")

    def test_join_horizontal_pads_short_blocks(self) -> None:
        self.assertEqual(join_horizontal([["ab", "cd"], ["x"]], gap=1), ["ab x", "cd  "])


class RenderFrameTests(unittest.TestCase):
    def test_writes_rows_from_home_with_line_clears(self) -> None:
        with mock.patch("paneview.render.os.write") as write_mock, mock.patch("paneview.render.sys.stdout") as stdout:
            stdout.fileno.return_value = 1
            render_frame(["one", "two"])

        write_mock.assert_called_once_with(1, b"\x1b[Hone\x1b[0m\x1b[K\r\ntwo\x1b[0m\x1b[K")


if __name__ == "__main__":
    unittest.main()
