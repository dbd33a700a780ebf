"""Syntax highlighting for file contents shown by ``cat``."""

from __future__ import annotations

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, Terminal256Formatter] = {}
_INVALID_STYLES: set[str] = set()


def _normalize_style(style: str) -> str:
    if style in _FORMATTERS:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def highlight_source(source: str, filename: str, style: str = DEFAULT_STYLE) -> str | None:
    """Return ``source`` colored for a 256-color terminal.

    Returns ``None`` when no lexer is known for ``filename`` (or it resolves
    to plain text) so callers print the contents untouched. Unknown style
    names fall back to ``monokai``.
    """
    try:
        lexer = get_lexer_for_filename(filename, source)
    except ClassNotFound:
        return None
    if isinstance(lexer, TextLexer):
        return None
    formatter = _formatter_for_style(_normalize_style(style))
    return pygments_highlight(source, lexer, formatter)
