"""Read-only JSON preferences.

Supplies defaults for the theme, markdown code style, and line-number toggle.
All access is defensive: malformed or missing config falls back safely, and
nothing is ever written back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "paneview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class Preferences:
    theme: str | None = None
    style: str | None = None
    show_line_numbers: bool = True


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring config %s: %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _optional_name(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_preferences(path: Path | None = None) -> Preferences:
    """Return validated preferences; invalid values fall back to defaults."""
    data = load_config(path)
    show_line_numbers = data.get("show_line_numbers")
    return Preferences(
        theme=_optional_name(data.get("theme")),
        style=_optional_name(data.get("style")),
        show_line_numbers=show_line_numbers if isinstance(show_line_numbers, bool) else True,
    )


__all__ = ["CONFIG_PATH", "Preferences", "load_config", "load_preferences"]
