"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (pane borders, header, help line). The
pygments style used for code blocks inside rendered markdown remains a
separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers.

    Instances are built once at startup and handed to the view composer; no
    renderer reads colors from module globals.
    """

    name: str
    reset: str
    border_focused: str
    border_unfocused: str
    border_selected: str
    list_title: str
    list_selected: str
    list_dir: str
    list_file: str
    list_description: str
    help_key: str
    help_text: str
    placeholder: str
    error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border_focused="\033[38;5;42m",
    border_unfocused="\033[38;5;240m",
    border_selected="\033[38;5;51m",
    list_title="\033[1;38;5;230;48;5;62m",
    list_selected="\033[1;38;5;170m",
    list_dir="\033[1;34m",
    list_file="\033[38;5;252m",
    list_description="\033[2;38;5;245m",
    help_key="\033[38;5;0;48;5;252m",
    help_text="",
    placeholder="\033[2;38;5;250m",
    error="\033[31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border_focused="\033[38;5;45m",
    border_unfocused="\033[2;38;5;31m",
    border_selected="\033[38;5;215m",
    list_title="\033[1;38;5;231;48;5;24m",
    list_selected="\033[1;38;5;45m",
    list_dir="\033[1;38;5;45m",
    list_file="\033[38;5;153m",
    list_description="\033[2;38;5;110m",
    help_key="\033[38;5;16;48;5;153m",
    help_text="",
    placeholder="\033[2;38;5;110m",
    error="\033[38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border_focused="",
    border_unfocused="",
    border_selected="",
    list_title="",
    list_selected="",
    list_dir="",
    list_file="",
    list_description="",
    help_key="",
    help_text="",
    placeholder="",
    error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
