"""User configuration loaded from a JSON file.

Covers theme, color, layout ratio, scrollback size, ``cat`` highlighting and
log level. The file is only ever read: nothing the user does in a session is
written back. All access is defensive: malformed or missing config falls back
to defaults.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .ui_theme import normalize_theme_name

APP_NAME = "panecmd"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_PANEL_HEIGHT_PERCENT = 60.0
MIN_PANEL_HEIGHT_PERCENT = 10.0
MAX_PANEL_HEIGHT_PERCENT = 90.0
DEFAULT_SCROLLBACK_LIMIT = 1000
DEFAULT_HIGHLIGHT_STYLE = "monokai"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Effective settings after validation and defaulting."""

    theme: str = "default"
    no_color: bool = False
    panel_height_percent: float = DEFAULT_PANEL_HEIGHT_PERCENT
    scrollback_limit: int = DEFAULT_SCROLLBACK_LIMIT
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE
    highlight_cat: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def panel_ratio(self) -> float:
        return self.panel_height_percent / 100.0


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _bool_value(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _panel_height_percent(data: dict[str, object]) -> float:
    """Read the pane share of the screen height, bounded to a usable range."""
    value = data.get("panel_height_percent")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_PANEL_HEIGHT_PERCENT
    if value < MIN_PANEL_HEIGHT_PERCENT or value > MAX_PANEL_HEIGHT_PERCENT:
        return DEFAULT_PANEL_HEIGHT_PERCENT
    return float(value)


def _scrollback_limit(data: dict[str, object]) -> int:
    value = data.get("scrollback_limit")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_SCROLLBACK_LIMIT
    return value


def _string_value(data: dict[str, object], key: str, default: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _log_level(data: dict[str, object]) -> str:
    """Return an upper-case level name known to :mod:`logging`."""
    name = _string_value(data, "log_level", DEFAULT_LOG_LEVEL).upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from the config file and the environment.

    A non-empty ``NO_COLOR`` environment variable forces plain output.
    """
    env = os.environ if environ is None else environ
    data = load_config()
    return Settings(
        theme=normalize_theme_name(_string_value(data, "theme", "default")),
        no_color=_bool_value(data, "no_color", False) or bool(env.get("NO_COLOR")),
        panel_height_percent=_panel_height_percent(data),
        scrollback_limit=_scrollback_limit(data),
        highlight_style=_string_value(data, "highlight_style", DEFAULT_HIGHLIGHT_STYLE),
        highlight_cat=_bool_value(data, "highlight_cat", True),
        log_level=_log_level(data),
    )
