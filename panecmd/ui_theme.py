"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (pane chrome, entries, terminal). Syntax
highlighting style for ``cat`` output remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    reset: str
    reverse: str
    border_focused: str
    border_unfocused: str
    title: str
    entry_dir: str
    entry_file: str
    cursor_marker: str
    prompt: str
    echo: str
    error: str
    hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    border_focused="\033[32m",
    border_unfocused="\033[90m",
    title="\033[1m",
    entry_dir="\033[1;34m",
    entry_file="\033[38;5;252m",
    cursor_marker="\033[33m",
    prompt="\033[1;32m",
    echo="\033[38;5;250m",
    error="\033[31m",
    hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    border_focused="\033[38;5;45m",
    border_unfocused="\033[2;38;5;31m",
    title="\033[1;38;5;153m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    cursor_marker="\033[38;5;39m",
    prompt="\033[1;38;5;45m",
    echo="\033[38;5;153m",
    error="\033[38;5;203m",
    hint="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    border_focused="",
    border_unfocused="",
    title="",
    entry_dir="",
    entry_file="",
    cursor_marker="",
    prompt="",
    echo="",
    error="",
    hint="",
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
