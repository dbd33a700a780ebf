"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, CSI/SS3 navigation keys, modifier combos and
multi-byte UTF-8 characters.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_CSI_LENGTH = 16
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x11": "CTRL_Q",
    b"\x01": "CTRL_A",
    b"\x05": "CTRL_E",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
    b"Z": "SHIFT_TAB",
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"7": "HOME",
    b"3": "DELETE",
    b"4": "END",
    b"8": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
}

# xterm modifier parameter: 3 = Alt, 9 = Meta (some macOS terminals).
_ALT_MODIFIERS = {b"3", b"9"}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    """Return the next byte, pushed-back bytes first, or ``None`` on timeout."""
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_utf8_char(fd: int, lead: bytes) -> str:
    """Complete a multi-byte UTF-8 character whose first byte is ``lead``."""
    data = lead
    for _ in range(_utf8_length(lead[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        if nxt[0] & 0xC0 != 0x80:
            _PENDING_BYTES.append(nxt)
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _decode_csi(fd: int) -> str:
    """Decode the remainder of ``ESC [`` into a key token."""
    params = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        if 0x40 <= part[0] <= 0x7E:
            final = part
            break
        params += part
        if len(params) > MAX_CSI_LENGTH:
            return "ESC"

    fields = params.split(b";")
    if final == b"~":
        return _CSI_TILDE_KEYS.get(fields[0], "ESC")
    key = _CSI_FINAL_KEYS.get(final)
    if key is None:
        return "ESC"
    if len(fields) == 2 and fields[1] in _ALT_MODIFIERS and key in {"LEFT", "RIGHT"}:
        return f"ALT_{key}"
    return key


def _decode_ss3(fd: int) -> str:
    """Decode ``ESC O x`` application-mode cursor keys."""
    part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if part is None:
        return "ESC"
    return _CSI_FINAL_KEYS.get(part, "ESC")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key and return its token, or ``""`` when nothing arrived in time."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        if ch[0] >= 0xC0:
            return _read_utf8_char(fd, ch)
        return ch.decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in {b"b", b"B"}:
        return "ALT_LEFT"
    if seq in {b"f", b"F"}:
        return "ALT_RIGHT"
    if seq == b"O":
        return _decode_ss3(fd)
    if seq == b"\x1b":
        # ESC ESC [ D: Alt+arrow as sent by terminals without modifier params.
        inner = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if inner != b"[":
            if inner is not None:
                _PENDING_BYTES.append(inner)
            _PENDING_BYTES.insert(0, seq)
            return "ESC"
        key = _decode_csi(fd)
        return f"ALT_{key}" if key in {"LEFT", "RIGHT"} else key
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    return _decode_csi(fd)
