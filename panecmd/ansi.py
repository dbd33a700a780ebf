"""ANSI-aware text measurement and line shaping utilities.

Provides clipping, padding and sanitising that preserve SGR escape sequences.
These helpers keep frame rows aligned when color codes and wide chars are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
# Any escape sequence a child process might emit: CSI, OSC, and two-byte forms.
ANY_ESCAPE_RE = re.compile(
    r"\x1b\[[0-9;?]*[ -/]*[@-~]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)?"
    r"|\x1b[@-Z\\-_]"
)
# C0 controls + DEL + C1 controls.
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies.

    Escape sequences are ignored and tabs are expanded from column zero.
    """
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            if col + w > max_cols:
                break
            out.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and pad it with spaces to exactly ``width``.

    A reset is appended after styled content so color never leaks into padding
    or the following cell.
    """
    if width <= 0:
        return ""
    clipped = clip_ansi_line(text, width)
    pad = width - display_width(clipped)
    if "\x1b" in clipped:
        clipped += "\033[0m"
    return clipped + " " * max(0, pad)


def clip_plain_from_left(text: str, max_cols: int) -> str:
    """Drop leading characters of unstyled ``text`` until it fits ``max_cols``.

    Used for paths and the command prompt, where the tail matters most.
    """
    if max_cols <= 0:
        return ""
    widths = [char_display_width(ch, 0) for ch in text]
    total = sum(widths)
    index = 0
    while total > max_cols and index < len(text):
        total -= widths[index]
        index += 1
    return text[index:]


def sanitize_line(text: str) -> str:
    """Make one line of captured output safe to place inside a frame.

    SGR color sequences survive; cursor movement, OSC titles and other escape
    sequences are removed together with control characters other than tab.
    Carriage returns keep only the text after the last one, as a terminal
    would display it.
    """
    if "\r" in text:
        text = text.rsplit("\r", 1)[-1] or text.replace("\r", "")

    out: list[str] = []
    pos = 0
    for match in ANY_ESCAPE_RE.finditer(text):
        out.append(_drop_controls(text[pos : match.start()]))
        seq = match.group(0)
        if seq.startswith("\x1b[") and seq.endswith("m"):
            out.append(seq)
        pos = match.end()
    out.append(_drop_controls(text[pos:]))
    return "".join(out)


def _drop_controls(text: str) -> str:
    return "".join(ch for ch in text if ch == "\t" or unicodedata.category(ch) != "Cc")


def sanitize_name(text: str) -> str:
    """Make a file name or path safe to draw inside one frame cell.

    Escape sequences are removed and every remaining C0/C1 control character,
    newline and tab included, becomes ``?``.
    """
    if _CONTROL_RE.search(text) is None:
        return text
    return _CONTROL_RE.sub("?", ANY_ESCAPE_RE.sub("", text))
