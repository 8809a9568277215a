"""Session bootstrap tests: start path resolution and TTY requirements."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from paneview.errors import RuntimeStartError
from paneview.runtime import app as app_mod
from paneview.state import Pane


class BuildStartStateTests(unittest.TestCase):
    def test_directory_path_starts_without_open_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a\n", encoding="utf-8")

            state = app_mod.build_start_state(root, app_mod.default_key_context())

        self.assertEqual(state.current_directory, root)
        self.assertIsNone(state.current_file_path)
        self.assertIs(state.focused_pane, Pane.NAVIGATOR)
        self.assertEqual([entry.name for entry in state.entries], ["..", "a.txt"])

    def test_file_path_opens_file_inside_parent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            target = root / "b.txt"
            target.write_text("hello\n", encoding="utf-8")

            state = app_mod.build_start_state(target, app_mod.default_key_context(), show_line_numbers=False)

        self.assertEqual(state.current_directory, root)
        self.assertEqual(state.current_file_path, target)
        self.assertEqual(state.file_bytes, b"hello\n")
        self.assertEqual(state.selected_index, 2)
        self.assertIs(state.focused_pane, Pane.CONTENT)
        self.assertFalse(state.show_line_numbers)

    def test_hidden_file_path_still_opens(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / ".env"
            target.write_text("KEY=1\n", encoding="utf-8")

            state = app_mod.build_start_state(target, app_mod.default_key_context())

        self.assertEqual(state.current_file_path, target)
        self.assertEqual(state.selected_index, 0)


class RunAppTests(unittest.TestCase):
    def test_non_tty_stdin_is_fatal(self) -> None:
        fake_sys = mock.Mock()
        fake_sys.stdin.fileno.return_value = 0
        fake_sys.stdout.fileno.return_value = 1
        with mock.patch.object(app_mod, "sys", fake_sys), mock.patch.object(
            app_mod.os, "isatty", return_value=False
        ), mock.patch.object(app_mod, "run_main_loop") as loop_mock:
            with self.assertRaises(RuntimeStartError):
                app_mod.run_app(Path.cwd())

        loop_mock.assert_not_called()

    def test_tty_runs_loop_with_resolved_theme(self) -> None:
        fake_sys = mock.Mock()
        fake_sys.stdin.fileno.return_value = 0
        fake_sys.stdout.fileno.return_value = 1
        with tempfile.TemporaryDirectory() as tmp, mock.patch.object(app_mod, "sys", fake_sys), mock.patch.object(
            app_mod.os, "isatty", return_value=True
        ), mock.patch.object(app_mod, "TerminalController") as terminal_cls, mock.patch.object(
            app_mod, "run_main_loop"
        ) as loop_mock:
            app_mod.run_app(Path(tmp), theme_name="ocean", no_color=False)

        terminal_cls.assert_called_once_with(0, 1)
        state, terminal, stdin_fd, _context, theme = loop_mock.call_args.args
        self.assertIs(terminal, terminal_cls.return_value)
        self.assertEqual(stdin_fd, 0)
        self.assertEqual(theme.name, "ocean")
        self.assertEqual(state.current_directory, Path(tmp).resolve())


if __name__ == "__main__":
    unittest.main()
