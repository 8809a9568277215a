"""Command-line front door for paneview.

Parses CLI options, merges them with the preferences file, and either prints
one formatted file (``--render``) or launches the interactive browser.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from pygments.styles import get_all_styles

from .config import load_preferences
from .errors import RuntimeStartError
from .runtime import run_app
from .source_pane import DEFAULT_CODE_STYLE, render_content
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(name)s %(levelname)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _known_styles() -> set[str]:
    return set(get_all_styles())


def _pygments_style(value: str) -> str:
    """argparse type accepting installed pygments style names only."""
    if value not in _known_styles():
        raise argparse.ArgumentTypeError(f"unknown pygments style: {value!r}")
    return value


def _default_render_width() -> int:
    """Resolve default render width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def configure_debug_log(path: Path) -> logging.Handler:
    """Send DEBUG records for the package to ``path``."""
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("paneview")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return handler


def render_file(path: Path, style: str, no_color: bool, show_line_numbers: bool, max_cols: int) -> str:
    """Format ``path`` exactly as the content pane would at ``max_cols`` columns."""
    rendered = render_content(
        path.read_bytes(),
        path.name,
        show_line_numbers,
        max_cols,
        code_style=style,
        no_color=no_color,
    )
    if not rendered.endswith("\n"):
        rendered += "\n"
    return rendered


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paneview",
        description="Browse a directory and view files in a two-pane terminal UI.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Starting directory or file. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--style",
        type=_pygments_style,
        default=None,
        help=f"Pygments style for code blocks in markdown (default: {DEFAULT_CODE_STYLE}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--no-line-numbers",
        action="store_true",
        help="Start with line numbers hidden.",
    )
    parser.add_argument("--debug-log", metavar="FILE", default=None, help="Write debug logging to FILE.")
    parser.add_argument("--render", metavar="FILE", help="Print the formatted content of FILE and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    return parser


def _resolve_style(cli_style: str | None, config_style: str | None) -> str:
    if cli_style is not None:
        return cli_style
    if config_style is not None and config_style in _known_styles():
        return config_style
    if config_style is not None:
        logger.debug("ignoring unknown configured style %r", config_style)
    return DEFAULT_CODE_STYLE


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run paneview.

    Flags win over the preferences file. Runtime failures are logged, printed
    to stderr as ``Error: <message>``, and exit with status 1.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug_log is not None:
        configure_debug_log(Path(args.debug_log))

    prefs = load_preferences()
    style = _resolve_style(args.style, prefs.style)
    theme = args.theme if args.theme is not None else prefs.theme
    show_line_numbers = False if args.no_line_numbers else prefs.show_line_numbers

    if args.render is not None:
        if args.path is not None:
            raise SystemExit("Cannot combine positional path with --render.")
        render_path = Path(args.render)
        if not render_path.is_file():
            raise SystemExit(f"Path not found: {render_path}")
        max_cols = args.max_cols if args.max_cols is not None else _default_render_width()
        try:
            output = render_file(render_path, style, args.no_color, show_line_numbers, max_cols)
        except OSError as exc:
            logger.error("render of %s failed: %s", render_path, exc)
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        sys.stdout.write(output)
        return

    path = Path(args.path) if args.path is not None else Path.cwd()
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")

    try:
        run_app(
            path,
            theme_name=theme,
            code_style=style,
            no_color=args.no_color,
            show_line_numbers=show_line_numbers,
        )
    except RuntimeStartError as exc:
        logger.error("runtime start failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except Exception as exc:
        logger.exception("runtime failed")
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
