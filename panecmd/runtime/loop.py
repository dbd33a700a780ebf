"""Main interactive event loop for the terminal UI.

Each iteration polls the terminal size (synthesising a resize action when it
changed), renders when the state is dirty, then decodes and dispatches one key.
Feature logic lives in :class:`InputDispatcher`; this loop is wiring only.
"""

from __future__ import annotations

import logging
import shutil

from ..dispatch import InputDispatcher
from ..input import Action, read_key, translate_key
from ..render import render_frame
from ..state import AppState
from ..ui_theme import UITheme
from .terminal import TerminalController

logger = logging.getLogger(__name__)

KEY_TIMEOUT_MS = 120


def run_main_loop(
    state: AppState,
    dispatcher: InputDispatcher,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
) -> None:
    """Run the interactive loop until a quit action is dispatched."""
    skip_next_lf = False
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            if (term.columns, term.lines) != (state.width, state.height):
                dispatcher.dispatch(Action.resize(term.columns, term.lines))

            if state.dirty:
                terminal.write_frame(render_frame(state, theme))
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=KEY_TIMEOUT_MS)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue
            if key == "ENTER_CR":
                key = "ENTER"
                skip_next_lf = True
            elif key == "ENTER_LF":
                key = "ENTER"
                skip_next_lf = False
            else:
                skip_next_lf = False

            action = translate_key(key)
            if action is None:
                logger.debug("ignored key %r", key)
                continue
            if dispatcher.dispatch(action):
                break
