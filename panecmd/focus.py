"""Keyboard focus across the two panes and the terminal."""

from __future__ import annotations

from enum import Enum


class Focus(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    TERMINAL = "terminal"

    def other_pane(self) -> Focus:
        return Focus.RIGHT if self is Focus.LEFT else Focus.LEFT


class FocusController:
    """Track the focused target and the pane focus returns to.

    The active pane is remembered while the terminal has focus and cannot be
    changed from there, so leaving the terminal always lands on the last pane
    the user worked in.
    """

    def __init__(self, active_pane: Focus = Focus.LEFT) -> None:
        if active_pane is Focus.TERMINAL:
            raise ValueError("active pane must be LEFT or RIGHT")
        self._focus = active_pane
        self._active_pane = active_pane

    @property
    def focus(self) -> Focus:
        return self._focus

    @property
    def active_pane(self) -> Focus:
        return self._active_pane

    @property
    def terminal_focused(self) -> bool:
        return self._focus is Focus.TERMINAL

    def toggle_terminal(self) -> Focus:
        if self._focus is Focus.TERMINAL:
            self._focus = self._active_pane
        else:
            self._focus = Focus.TERMINAL
        return self._focus

    def set_active_pane(self, pane: Focus) -> bool:
        """Make ``pane`` active and focused; ignored while the terminal has focus."""
        if pane is Focus.TERMINAL:
            raise ValueError("active pane must be LEFT or RIGHT")
        if self._focus is Focus.TERMINAL:
            return False
        changed = pane is not self._focus
        self._active_pane = pane
        self._focus = pane
        return changed

    def switch_pane(self) -> bool:
        return self.set_active_pane(self._active_pane.other_pane())

    def __repr__(self) -> str:
        return f"FocusController(focus={self._focus.value}, active_pane={self._active_pane.value})"
