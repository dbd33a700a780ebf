"""Logical input actions and their translation from key tokens.

The dispatcher only ever sees :class:`Action` values, so it stays independent
of how keys were decoded and can be driven directly from tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ActionKind(Enum):
    QUIT = "quit"
    TOGGLE_TERMINAL = "toggle_terminal"
    SELECT_LEFT_PANE = "select_left_pane"
    SELECT_RIGHT_PANE = "select_right_pane"
    SWITCH_PANE = "switch_pane"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    ENTER = "enter"
    BACKSPACE = "backspace"
    DELETE = "delete"
    INSERT_TEXT = "insert_text"
    RESIZE = "resize"


@dataclass(frozen=True)
class Action:
    """One logical input event.

    ``text`` is set only for ``INSERT_TEXT``; ``width``/``height`` only for
    ``RESIZE``.
    """

    kind: ActionKind
    text: str = ""
    width: int = 0
    height: int = 0

    @classmethod
    def insert(cls, text: str) -> Action:
        return cls(ActionKind.INSERT_TEXT, text=text)

    @classmethod
    def resize(cls, width: int, height: int) -> Action:
        return cls(ActionKind.RESIZE, width=width, height=height)


KEY_ACTIONS: dict[str, ActionKind] = {
    "CTRL_Q": ActionKind.QUIT,
    "CTRL_C": ActionKind.QUIT,
    "TAB": ActionKind.TOGGLE_TERMINAL,
    "ALT_LEFT": ActionKind.SELECT_LEFT_PANE,
    "ALT_RIGHT": ActionKind.SELECT_RIGHT_PANE,
    "SHIFT_TAB": ActionKind.SWITCH_PANE,
    "UP": ActionKind.MOVE_UP,
    "DOWN": ActionKind.MOVE_DOWN,
    "LEFT": ActionKind.MOVE_LEFT,
    "RIGHT": ActionKind.MOVE_RIGHT,
    "PAGE_UP": ActionKind.PAGE_UP,
    "PAGE_DOWN": ActionKind.PAGE_DOWN,
    "HOME": ActionKind.HOME,
    "CTRL_A": ActionKind.HOME,
    "END": ActionKind.END,
    "CTRL_E": ActionKind.END,
    "ENTER": ActionKind.ENTER,
    "BACKSPACE": ActionKind.BACKSPACE,
    "DELETE": ActionKind.DELETE,
}


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is literal text rather than a named key token."""
    return len(key) == 1 and key.isprintable()


def translate_key(key: str) -> Action | None:
    """Map a key token to an :class:`Action`; unknown keys yield ``None``."""
    if not key:
        return None
    kind = KEY_ACTIONS.get(key)
    if kind is not None:
        return Action(kind)
    if is_printable_key(key):
        return Action.insert(key)
    return None
