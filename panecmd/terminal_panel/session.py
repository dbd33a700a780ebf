"""Command-line panel state: input line, history and scrollback."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..ansi import sanitize_line

DEFAULT_SCROLLBACK_LIMIT = 1000
PROMPT = "$ "


@dataclass
class TerminalSession:
    """Editable input buffer plus everything the terminal has printed.

    ``input_buffer`` holds one string per character so ``edit_cursor`` indexes
    characters, not bytes. ``history_index`` is ``-1`` while the buffer holds
    live typed text and points into ``history`` while a recalled entry is
    shown. ``scroll_offset`` counts lines back from the newest output.
    """

    cwd: str
    input_buffer: list[str] = field(default_factory=list)
    edit_cursor: int = 0
    history: list[str] = field(default_factory=list)
    history_index: int = -1
    output_lines: list[str] = field(default_factory=list)
    scroll_offset: int = 0
    scrollback_limit: int = DEFAULT_SCROLLBACK_LIMIT

    @property
    def input_text(self) -> str:
        return "".join(self.input_buffer)

    def _set_buffer(self, text: str) -> None:
        self.input_buffer = list(text)
        self.edit_cursor = len(self.input_buffer)

    def _mark_edited(self) -> None:
        self.history_index = -1

    # -- editing -----------------------------------------------------------

    def insert(self, text: str) -> None:
        if not text:
            return
        chars = list(text)
        self.input_buffer[self.edit_cursor : self.edit_cursor] = chars
        self.edit_cursor += len(chars)
        self._mark_edited()

    def backspace(self) -> bool:
        if self.edit_cursor == 0:
            return False
        del self.input_buffer[self.edit_cursor - 1]
        self.edit_cursor -= 1
        self._mark_edited()
        return True

    def delete_forward(self) -> bool:
        if self.edit_cursor >= len(self.input_buffer):
            return False
        del self.input_buffer[self.edit_cursor]
        self._mark_edited()
        return True

    def move_cursor(self, delta: int) -> bool:
        previous = self.edit_cursor
        self.edit_cursor = max(0, min(len(self.input_buffer), self.edit_cursor + delta))
        return self.edit_cursor != previous

    def move_to_start(self) -> bool:
        return self.move_cursor(-len(self.input_buffer))

    def move_to_end(self) -> bool:
        return self.move_cursor(len(self.input_buffer))

    # -- history -----------------------------------------------------------

    def recall_previous(self) -> bool:
        """Show the previous history entry; stops at the oldest one."""
        if not self.history:
            return False
        if self.history_index == -1:
            self.history_index = len(self.history) - 1
        elif self.history_index > 0:
            self.history_index -= 1
        self._set_buffer(self.history[self.history_index])
        return True

    def recall_next(self) -> bool:
        """Show the next history entry; past the newest, return to an empty line."""
        if self.history_index == -1:
            return False
        if self.history_index < len(self.history) - 1:
            self.history_index += 1
            self._set_buffer(self.history[self.history_index])
        else:
            self.history_index = -1
            self._set_buffer("")
        return True

    # -- submission --------------------------------------------------------

    def submit(self) -> str | None:
        """Consume the input line and return it trimmed, or ``None`` when blank.

        A non-blank line is recorded in history (consecutive repeats once)
        and echoed to the output. The input is reset and the view returns to
        the newest output either way.
        """
        line = self.input_text.strip()
        self.input_buffer = []
        self.edit_cursor = 0
        self.history_index = -1
        if not line:
            return None
        if not self.history or self.history[-1] != line:
            self.history.append(line)
        self.append_output([PROMPT + line])
        self.scroll_offset = 0
        return line

    # -- output ------------------------------------------------------------

    def append_output(self, lines: Iterable[str]) -> None:
        self.output_lines.extend(sanitize_line(line) for line in lines)
        overflow = len(self.output_lines) - max(1, self.scrollback_limit)
        if overflow > 0:
            del self.output_lines[:overflow]

    def clear_output(self) -> None:
        self.output_lines.clear()
        self.scroll_offset = 0

    def max_scroll_offset(self, viewport_rows: int) -> int:
        return max(0, len(self.output_lines) - max(1, viewport_rows))

    def scroll_by(self, delta: int, viewport_rows: int) -> bool:
        """Move the view ``delta`` lines toward older output (negative: newer)."""
        previous = self.scroll_offset
        self.scroll_offset = max(0, min(self.max_scroll_offset(viewport_rows), self.scroll_offset + delta))
        return self.scroll_offset != previous
