"""Top-level input state machine.

Each :class:`Action` is applied to :class:`AppState` to completion before the
next one. The machine is flat: the focus target selects one of two handler
tables (pane or terminal), and a few actions are global.
"""

from __future__ import annotations

import logging

from .focus import Focus
from .input import Action, ActionBinding, ActionKind, ActionRegistry
from .panes import DirectoryView
from .state import AppState
from .terminal_panel import CommandRouter

logger = logging.getLogger(__name__)


class InputDispatcher:
    """Apply actions to application state.

    ``dispatch`` returns ``True`` when the application should quit. Any other
    action that changes something visible marks the state dirty.
    """

    def __init__(self, state: AppState, router: CommandRouter) -> None:
        self.state = state
        self.router = router
        self._global = ActionRegistry().register_bindings(
            ActionBinding((ActionKind.TOGGLE_TERMINAL,), self._toggle_terminal),
            ActionBinding((ActionKind.RESIZE,), self._resize),
        )
        self._pane = ActionRegistry().register_bindings(
            ActionBinding((ActionKind.SELECT_LEFT_PANE,), lambda _a: self._select_pane(Focus.LEFT)),
            ActionBinding((ActionKind.SELECT_RIGHT_PANE,), lambda _a: self._select_pane(Focus.RIGHT)),
            ActionBinding((ActionKind.SWITCH_PANE,), lambda _a: self.state.focus.switch_pane()),
            ActionBinding((ActionKind.MOVE_UP,), lambda _a: self._move_pane_cursor(-1)),
            ActionBinding((ActionKind.MOVE_DOWN,), lambda _a: self._move_pane_cursor(1)),
            ActionBinding((ActionKind.PAGE_UP,), lambda _a: self._move_pane_cursor(-self._pane_rows())),
            ActionBinding((ActionKind.PAGE_DOWN,), lambda _a: self._move_pane_cursor(self._pane_rows())),
            ActionBinding((ActionKind.HOME,), self._pane_home),
            ActionBinding((ActionKind.END,), self._pane_end),
            ActionBinding((ActionKind.MOVE_RIGHT, ActionKind.ENTER), self._enter_pane_item),
            ActionBinding((ActionKind.MOVE_LEFT, ActionKind.BACKSPACE), self._pane_up),
        )
        session = state.terminal
        self._terminal = ActionRegistry().register_bindings(
            ActionBinding((ActionKind.MOVE_LEFT,), lambda _a: session.move_cursor(-1)),
            ActionBinding((ActionKind.MOVE_RIGHT,), lambda _a: session.move_cursor(1)),
            ActionBinding((ActionKind.HOME,), lambda _a: session.move_to_start()),
            ActionBinding((ActionKind.END,), lambda _a: session.move_to_end()),
            ActionBinding((ActionKind.MOVE_UP,), lambda _a: session.recall_previous()),
            ActionBinding((ActionKind.MOVE_DOWN,), lambda _a: session.recall_next()),
            ActionBinding((ActionKind.PAGE_UP,), lambda _a: self._scroll_terminal(1)),
            ActionBinding((ActionKind.PAGE_DOWN,), lambda _a: self._scroll_terminal(-1)),
            ActionBinding((ActionKind.BACKSPACE,), lambda _a: session.backspace()),
            ActionBinding((ActionKind.DELETE,), lambda _a: session.delete_forward()),
            ActionBinding((ActionKind.INSERT_TEXT,), self._insert_text),
            ActionBinding((ActionKind.ENTER,), self._submit),
        )

    def dispatch(self, action: Action) -> bool:
        """Apply one action and return ``True`` when the app should quit."""
        if action.kind is ActionKind.QUIT:
            return True
        changed = self._global.dispatch(action)
        if changed is None:
            table = self._terminal if self.state.focus.terminal_focused else self._pane
            changed = table.dispatch(action)
        if changed:
            self.state.dirty = True
        return False

    # -- geometry ----------------------------------------------------------

    def _pane_rows(self) -> int:
        return max(1, self.state.layout().pane_rows)

    def _terminal_rows(self) -> int:
        return max(1, self.state.layout().terminal_output_rows)

    # -- global ------------------------------------------------------------

    def _toggle_terminal(self, _action: Action) -> bool:
        self.state.focus.toggle_terminal()
        return True

    def _resize(self, action: Action) -> bool:
        state = self.state
        state.width = max(0, action.width)
        state.height = max(0, action.height)
        rows = self._pane_rows()
        state.left.ensure_visible(rows)
        state.right.ensure_visible(rows)
        state.terminal.scroll_by(0, self._terminal_rows())
        logger.debug("resize to %dx%d", state.width, state.height)
        return True

    # -- panes -------------------------------------------------------------

    def _current_pane(self) -> DirectoryView:
        return self.state.pane(self.state.focus.focus)

    def _select_pane(self, side: Focus) -> bool:
        return self.state.focus.set_active_pane(side)

    def _move_pane_cursor(self, delta: int) -> bool:
        view = self._current_pane()
        before = (view.cursor, view.scroll_offset)
        view.move_cursor(delta, self._pane_rows())
        return (view.cursor, view.scroll_offset) != before

    def _pane_home(self, _action: Action) -> bool:
        view = self._current_pane()
        before = (view.cursor, view.scroll_offset)
        view.move_to_first(self._pane_rows())
        return (view.cursor, view.scroll_offset) != before

    def _pane_end(self, _action: Action) -> bool:
        view = self._current_pane()
        before = (view.cursor, view.scroll_offset)
        view.move_to_last(self._pane_rows())
        return (view.cursor, view.scroll_offset) != before

    def _enter_pane_item(self, _action: Action) -> bool:
        view = self._current_pane()
        if view.selected is None:
            return False
        message = view.enter_selected()
        if message is not None:
            self.state.terminal.append_output([message])
        return True

    def _pane_up(self, _action: Action) -> bool:
        self._current_pane().navigate_up()
        return True

    # -- terminal ----------------------------------------------------------

    def _scroll_terminal(self, direction: int) -> bool:
        rows = self._terminal_rows()
        return self.state.terminal.scroll_by(direction * rows, rows)

    def _insert_text(self, action: Action) -> bool:
        if not action.text:
            return False
        self.state.terminal.insert(action.text)
        return True

    def _submit(self, _action: Action) -> bool:
        session = self.state.terminal
        line = session.submit()
        if line is not None:
            session.append_output(self.router.route(session, line))
            session.scroll_offset = 0
        return True
