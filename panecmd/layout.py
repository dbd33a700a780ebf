"""Frame geometry derived from the terminal size.

Nothing here is stored: the dispatcher and the renderer both recompute the
layout from the last reported ``(width, height)`` whenever they need it.
"""

from __future__ import annotations

from dataclasses import dataclass

MIN_WIDTH = 12
MIN_HEIGHT = 6
MIN_PANEL_HEIGHT = 3
MIN_TERMINAL_HEIGHT = 3
DEFAULT_PANEL_RATIO = 0.6


@dataclass(frozen=True)
class FrameLayout:
    """Sizes of the two panels (top) and the terminal strip (bottom)."""

    width: int
    height: int
    left_width: int
    right_width: int
    panel_height: int
    terminal_height: int

    @property
    def too_small(self) -> bool:
        return self.width < MIN_WIDTH or self.height < MIN_HEIGHT

    @property
    def pane_rows(self) -> int:
        """Entry rows inside a panel border."""
        return max(0, self.panel_height - 2)

    @property
    def terminal_output_rows(self) -> int:
        """Scrollback rows between the terminal's top border and its input row."""
        return max(0, self.terminal_height - 3)


def compute_frame_layout(width: int, height: int, panel_ratio: float = DEFAULT_PANEL_RATIO) -> FrameLayout:
    """Split ``width`` x ``height`` into panels and terminal.

    Panels take ``panel_ratio`` of the height (rounded) but always leave the
    terminal at least its border and input row; the left panel gets the
    smaller half of an odd width.
    """
    width = max(0, width)
    height = max(0, height)
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        return FrameLayout(width, height, 0, 0, 0, 0)

    panel_height = int(round(height * panel_ratio))
    panel_height = max(MIN_PANEL_HEIGHT, min(height - MIN_TERMINAL_HEIGHT, panel_height))
    left_width = width // 2
    return FrameLayout(
        width=width,
        height=height,
        left_width=left_width,
        right_width=width - left_width,
        panel_height=panel_height,
        terminal_height=height - panel_height,
    )
