"""Directory pane model: path, listing, selection cursor and scroll offset."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..fs import Entry, join_path, list_directory, parent_path
from ..scroll import scroll_window

logger = logging.getLogger(__name__)

DirectoryLister = Callable[[str], list[Entry]]


@dataclass
class DirectoryView:
    """One browsing pane.

    ``cursor`` stays inside ``entries`` (0 when empty) and ``scroll_offset``
    keeps it inside the viewport after every mutation. Changing ``path``
    always reloads the listing and resets both to the top.
    """

    path: str
    entries: list[Entry] = field(default_factory=list)
    cursor: int = 0
    scroll_offset: int = 0
    lister: DirectoryLister = field(default=list_directory, repr=False, compare=False)

    @classmethod
    def open(cls, path: str, lister: DirectoryLister = list_directory) -> DirectoryView:
        """Create a view on ``path`` with its listing loaded."""
        view = cls(path=path, lister=lister)
        view.reload()
        return view

    @property
    def selected(self) -> Entry | None:
        if not self.entries:
            return None
        return self.entries[self.cursor]

    def reload(self) -> None:
        """Re-list ``path``; unreadable directories show as empty."""
        try:
            self.entries = list(self.lister(self.path))
        except OSError as exc:
            logger.debug("cannot list %s: %s", self.path, exc)
            self.entries = []
        self.cursor = 0
        self.scroll_offset = 0

    def _change_path(self, path: str) -> None:
        self.path = path
        self.reload()

    def navigate_into(self, entry: Entry) -> str | None:
        """Enter ``entry`` when it is a directory.

        For a file nothing moves; the returned line reports the file instead.
        """
        target = join_path(self.path, entry.name)
        if not entry.is_dir:
            return f"file opened: {target}"
        self._change_path(target)
        return None

    def enter_selected(self) -> str | None:
        entry = self.selected
        if entry is None:
            return None
        return self.navigate_into(entry)

    def navigate_up(self) -> None:
        self._change_path(parent_path(self.path))

    def move_cursor(self, delta: int, viewport_rows: int) -> None:
        if not self.entries:
            self.cursor = 0
            self.scroll_offset = 0
            return
        self.cursor = max(0, min(len(self.entries) - 1, self.cursor + delta))
        self.ensure_visible(viewport_rows)

    def move_to_first(self, viewport_rows: int) -> None:
        self.move_cursor(-len(self.entries), viewport_rows)

    def move_to_last(self, viewport_rows: int) -> None:
        self.move_cursor(len(self.entries), viewport_rows)

    def ensure_visible(self, viewport_rows: int) -> None:
        """Re-fit ``scroll_offset`` for ``viewport_rows`` (after moves or resizes)."""
        rows = max(1, viewport_rows)
        offset = min(self.scroll_offset, max(0, len(self.entries) - rows))
        self.scroll_offset = scroll_window(len(self.entries), rows, self.cursor, offset).offset
