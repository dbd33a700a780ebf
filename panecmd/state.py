from __future__ import annotations

from dataclasses import dataclass, field

from .focus import Focus, FocusController
from .layout import DEFAULT_PANEL_RATIO, FrameLayout, compute_frame_layout
from .panes import DirectoryView
from .terminal_panel import TerminalSession


@dataclass
class AppState:
    left: DirectoryView
    right: DirectoryView
    terminal: TerminalSession
    focus: FocusController = field(default_factory=FocusController)
    width: int = 80
    height: int = 24
    panel_ratio: float = DEFAULT_PANEL_RATIO
    dirty: bool = True

    def layout(self) -> FrameLayout:
        return compute_frame_layout(self.width, self.height, self.panel_ratio)

    def pane(self, side: Focus) -> DirectoryView:
        if side is Focus.LEFT:
            return self.left
        if side is Focus.RIGHT:
            return self.right
        raise ValueError(f"not a pane: {side!r}")

    @property
    def focused_pane(self) -> DirectoryView | None:
        if self.focus.terminal_focused:
            return None
        return self.pane(self.focus.focus)

    def snapshot(self) -> dict[str, object]:
        """Plain-data summary of the state, suitable for logs and test assertions."""
        return {
            "focus": self.focus.focus.value,
            "active_pane": self.focus.active_pane.value,
            "size": [self.width, self.height],
            "left": {
                "path": self.left.path,
                "cursor": self.left.cursor,
                "scroll_offset": self.left.scroll_offset,
                "entries": len(self.left.entries),
            },
            "right": {
                "path": self.right.path,
                "cursor": self.right.cursor,
                "scroll_offset": self.right.scroll_offset,
                "entries": len(self.right.entries),
            },
            "terminal": {
                "cwd": self.terminal.cwd,
                "input": self.terminal.input_text,
                "edit_cursor": self.terminal.edit_cursor,
                "history": len(self.terminal.history),
                "history_index": self.terminal.history_index,
                "output_lines": len(self.terminal.output_lines),
                "scroll_offset": self.terminal.scroll_offset,
            },
        }
