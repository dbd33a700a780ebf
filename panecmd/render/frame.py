"""Pure frame composition for the two panels and the terminal strip.

Nothing here touches the terminal: the renderer turns an :class:`AppState`
and a :class:`UITheme` into exactly ``height`` rows of exactly ``width``
display columns, and the runtime loop writes them.
"""

from __future__ import annotations

from ..ansi import char_display_width, clip_plain_from_left, display_width, fit_ansi_line, sanitize_name
from ..focus import Focus
from ..layout import MIN_HEIGHT, MIN_WIDTH, FrameLayout
from ..panes import DirectoryView
from ..scroll import scroll_window
from ..state import AppState
from ..terminal_panel import PROMPT, TerminalSession
from ..ui_theme import UITheme

TOO_SMALL_MESSAGE = "terminal too small"
PLAIN_CURSOR = "_"


def selected_with_ansi(text: str, theme: UITheme) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text or not theme.reverse:
        return text

    # Keep reverse video active even when the text contains internal resets.
    return theme.reverse + text.replace("\033[0m", "\033[0;7m") + theme.reset


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def _border_text(
    width: int,
    fill: str,
    style: str,
    theme: UITheme,
    label: str = "",
    label_style: str = "",
    right_label: str = "",
) -> str:
    """Horizontal rule of ``fill`` with ``label`` inset on the left.

    Long labels keep their tail. ``right_label`` is inset on the right and
    dropped when there is no room for it.
    """
    if width <= 0:
        return ""
    right = ""
    if right_label:
        right = f" {right_label} {fill}"
        if display_width(right) + 2 > width:
            right = ""
    room = width - display_width(right) - 4
    label = clip_plain_from_left(sanitize_name(label), room) if label and room > 0 else ""
    if not label:
        return _styled(fill * (width - display_width(right)) + right, style, theme)
    middle = max(0, width - display_width(label) - 3 - display_width(right))
    return (
        _styled(f"{fill} ", style, theme)
        + _styled(label, label_style, theme)
        + _styled(" " + fill * middle + right, style, theme)
    )


def _too_small_lines(width: int, height: int) -> list[str]:
    message = f"{TOO_SMALL_MESSAGE} ({width}x{height}, need {MIN_WIDTH}x{MIN_HEIGHT})"
    lines = [fit_ansi_line(message, width)]
    lines.extend(" " * width for _ in range(height - 1))
    return lines[:height]


def _panel_lines(
    view: DirectoryView,
    width: int,
    height: int,
    focused: bool,
    theme: UITheme,
) -> list[str]:
    fill = "=" if focused else "-"
    style = theme.border_focused if focused else theme.border_unfocused
    side = _styled("|", style, theme)
    inner = max(0, width - 2)
    rows = max(0, height - 2)
    total = len(view.entries)
    position = f"{view.cursor + 1}/{total}" if total else "0/0"

    lines = [_border_text(width, fill, style, theme, view.path, theme.title)]
    window = scroll_window(total, rows, view.cursor, view.scroll_offset)
    visible = view.entries[window.start : window.end] if rows else []
    for index, entry in enumerate(visible, start=window.start):
        name_style = theme.entry_dir if entry.is_dir else theme.entry_file
        name = _styled(sanitize_name(entry.display_name), name_style, theme)
        if index == view.cursor:
            text = _styled(">", theme.cursor_marker, theme) + " " + name
            cell = fit_ansi_line(text, inner)
            if focused:
                cell = selected_with_ansi(cell, theme)
        else:
            cell = fit_ansi_line("  " + name, inner)
        lines.append(side + cell + side)
    while len(lines) < height - 1:
        lines.append(side + " " * inner + side)
    lines.append(_border_text(width, fill, style, theme, right_label=position))
    return lines[:height]


def _output_style(line: str, theme: UITheme) -> str:
    if line.startswith("Error: "):
        return theme.error
    if line.startswith(PROMPT):
        return theme.echo
    return ""


def _input_cells(session: TerminalSession, focused: bool, theme: UITheme) -> tuple[list[tuple[str, int]], int]:
    """Return ``(cells, cursor_cell_index)`` for the prompt and input buffer.

    Each cell is ``(styled text, display width)``; the cursor cell is the
    character under the edit cursor, or a blank past the end. The cursor cell
    is always at least one column wide.
    """
    cells = [(_styled(ch, theme.prompt, theme), char_display_width(ch, 0)) for ch in PROMPT]
    buffer = session.input_buffer
    cursor_index = len(cells) + session.edit_cursor
    for position, ch in enumerate(buffer):
        if ch == "\t":
            ch = " "
        if focused and position == session.edit_cursor:
            cells.append(_cursor_cell(ch, theme))
        else:
            cells.append((ch, char_display_width(ch, 0)))
    if session.edit_cursor >= len(buffer):
        cells.append(_cursor_cell(" ", theme) if focused else (" ", 1))
    return cells, cursor_index


def _cursor_cell(ch: str, theme: UITheme) -> tuple[str, int]:
    """Return the cursor cell for ``ch`` and the columns it actually draws."""
    width = char_display_width(ch, 0)
    if width == 0:
        # A zero-width mark stays on its base character; the cursor gets a blank cell after it.
        text, _ = _cursor_cell(" ", theme)
        return ch + text, 1
    if theme.reverse:
        return f"{theme.reverse}{ch}{theme.reset}", width
    return PLAIN_CURSOR * width, width


def _input_text(session: TerminalSession, width: int, focused: bool, theme: UITheme) -> str:
    """Render the prompt line, scrolled horizontally so the cursor stays visible."""
    cells, cursor_index = _input_cells(session, focused, theme)
    start = 0
    used = sum(width_ for _, width_ in cells[: cursor_index + 1])
    while used > width and start < cursor_index:
        used -= cells[start][1]
        start += 1
    return fit_ansi_line("".join(text for text, _ in cells[start:]), width)


def _terminal_lines(session: TerminalSession, width: int, height: int, focused: bool, theme: UITheme) -> list[str]:
    fill = "=" if focused else "-"
    style = theme.border_focused if focused else theme.border_unfocused
    side = _styled("|", style, theme)
    inner = max(0, width - 2)
    rows = max(0, height - 3)

    lines = [_border_text(width, fill, style, theme, session.cwd, theme.title)]
    end = len(session.output_lines) - session.scroll_offset
    start = max(0, end - rows)
    visible = session.output_lines[start : max(start, end)] if rows else []
    for line in visible:
        lines.append(side + fit_ansi_line(_styled(line, _output_style(line, theme), theme), inner) + side)
    while len(lines) < rows + 1:
        lines.append(side + " " * inner + side)
    lines.append(side + _input_text(session, inner, focused, theme) + side)

    indicator = ""
    if session.scroll_offset > 0:
        indicator = f"scrolled {session.scroll_offset} up"
    hint = "Tab: panes" if focused else "Tab: terminal"
    lines.append(_border_text(width, fill, style, theme, hint, theme.hint, indicator))
    return lines[:height]


def render_frame_lines(state: AppState, theme: UITheme) -> list[str]:
    """Compose the frame as a list of rows for the current state."""
    layout: FrameLayout = state.layout()
    if layout.too_small:
        return _too_small_lines(layout.width, layout.height)

    focus = state.focus.focus
    left = _panel_lines(state.left, layout.left_width, layout.panel_height, focus is Focus.LEFT, theme)
    right = _panel_lines(state.right, layout.right_width, layout.panel_height, focus is Focus.RIGHT, theme)
    lines = [left_row + right_row for left_row, right_row in zip(left, right)]
    lines.extend(
        _terminal_lines(
            state.terminal,
            layout.width,
            layout.terminal_height,
            focus is Focus.TERMINAL,
            theme,
        )
    )
    return lines


def render_frame(state: AppState, theme: UITheme) -> str:
    return "\r\n".join(render_frame_lines(state, theme))
