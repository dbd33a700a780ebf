"""Viewport arithmetic shared by directory panes and the terminal scrollback."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ScrollWindow:
    """Visible slice ``[start, end)`` and the offset that produced it."""

    offset: int
    start: int
    end: int


def scroll_window(item_count: int, viewport_height: int, cursor: int, offset: int) -> ScrollWindow:
    """Return the window that keeps ``cursor`` visible, scrolling minimally.

    The offset only moves when the cursor falls outside
    ``[offset, offset + viewport_height)``; it then lands so the cursor sits on
    the nearest edge. Heights below one are treated as one.
    """
    height = max(1, viewport_height)
    new_offset = max(0, offset)
    if cursor < new_offset:
        new_offset = max(0, cursor)
    elif cursor >= new_offset + height:
        new_offset = cursor - height + 1
    start = min(new_offset, max(0, item_count))
    end = min(new_offset + height, max(0, item_count))
    return ScrollWindow(offset=new_offset, start=start, end=max(start, end))


def visible_slice(
    items: Sequence[T],
    viewport_height: int,
    cursor: int,
    offset: int,
) -> tuple[list[T], int]:
    """Return ``(visible items, new offset)`` for ``items``."""
    window = scroll_window(len(items), viewport_height, cursor, offset)
    return list(items[window.start : window.end]), window.offset
