"""Application bootstrap for the interactive session.

Loads settings, configures logging, builds the initial state and wires the
dispatcher, renderer and terminal controller into ``run_main_loop``.
"""

from __future__ import annotations

import functools
import logging
import os
import shutil
import sys

from ..config import Settings, load_settings
from ..dispatch import InputDispatcher
from ..focus import FocusController
from ..highlight import highlight_source
from ..logs import configure_logging
from ..panes import DirectoryView
from ..state import AppState
from ..terminal_panel import CommandRouter, TerminalSession
from ..ui_theme import resolve_theme
from .loop import run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_state(start_path: str, settings: Settings) -> AppState:
    """Both panes and the terminal start in ``start_path``; focus starts on the left pane."""
    term = shutil.get_terminal_size((80, 24))
    return AppState(
        left=DirectoryView.open(start_path),
        right=DirectoryView.open(start_path),
        terminal=TerminalSession(cwd=start_path, scrollback_limit=settings.scrollback_limit),
        focus=FocusController(),
        width=term.columns,
        height=term.lines,
        panel_ratio=settings.panel_ratio,
    )


def build_router(settings: Settings) -> CommandRouter:
    """Command router with ``cat`` highlighting when color and highlighting are on."""
    highlighter = None
    if settings.highlight_cat and not settings.no_color:
        highlighter = functools.partial(highlight_source, style=settings.highlight_style)
    return CommandRouter(highlighter=highlighter)


def run_app(start_path: str | None = None) -> None:
    """Run the interactive file manager until the user quits."""
    settings = load_settings()
    configure_logging(settings.log_level)

    if not os.isatty(sys.stdin.fileno()) or not os.isatty(sys.stdout.fileno()):
        raise SystemExit("panecmd needs an interactive terminal on stdin and stdout.")

    path = os.path.abspath(start_path if start_path is not None else os.getcwd())
    state = build_state(path, settings)
    dispatcher = InputDispatcher(state, build_router(settings))
    theme = resolve_theme(settings.theme, no_color=settings.no_color)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    logger.info("start in %s at %dx%d (theme %s)", path, state.width, state.height, theme.name)
    try:
        run_main_loop(state, dispatcher, terminal, stdin_fd, theme)
    finally:
        logger.info("stop")
        logger.debug("final state %s", state.snapshot())
