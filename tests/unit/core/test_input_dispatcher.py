"""State-machine tests: each case applies actions and checks the resulting state."""

from __future__ import annotations

import unittest

from panecmd.dispatch import InputDispatcher
from panecmd.focus import Focus
from panecmd.fs import Entry
from panecmd.input import Action, ActionKind
from panecmd.panes import DirectoryView
from panecmd.process import ExecutionResult
from panecmd.state import AppState
from panecmd.terminal_panel import CommandRouter, TerminalSession


def _tree_lister(path: str) -> list[Entry]:
    if path == "/root":
        return [Entry("docs", True), Entry("readme.txt", False, 6)] + [
            Entry(f"z{i:02d}", False, i) for i in range(30)
        ]
    if path == "/root/docs":
        return [Entry("guide.md", False, 10)]
    return []


def _make_state(width: int = 80, height: int = 24) -> AppState:
    return AppState(
        left=DirectoryView.open("/root", lister=_tree_lister),
        right=DirectoryView.open("/root", lister=_tree_lister),
        terminal=TerminalSession(cwd="/root"),
        width=width,
        height=height,
    )


def _make_dispatcher(state: AppState) -> InputDispatcher:
    executor = lambda _cmd, _args, _cwd: ExecutionResult(output=b"ran\n", succeeded=True, exit_code=0)  # noqa: E731
    return InputDispatcher(state, CommandRouter(executor=executor))


def _press(dispatcher: InputDispatcher, *kinds: ActionKind) -> None:
    for kind in kinds:
        dispatcher.dispatch(Action(kind))


def _type(dispatcher: InputDispatcher, text: str) -> None:
    for ch in text:
        dispatcher.dispatch(Action.insert(ch))


class GlobalActionTests(unittest.TestCase):
    def test_quit_returns_true_from_any_focus(self) -> None:
        state = _make_state()
        dispatcher = _make_dispatcher(state)

        self.assertTrue(dispatcher.dispatch(Action(ActionKind.QUIT)))
        _press(dispatcher, ActionKind.TOGGLE_TERMINAL)
        self.assertTrue(dispatcher.dispatch(Action(ActionKind.QUIT)))

    def test_other_actions_do_not_quit_and_mark_dirty(self) -> None:
        state = _make_state()
        state.dirty = False
        dispatcher = _make_dispatcher(state)

        self.assertFalse(dispatcher.dispatch(Action(ActionKind.MOVE_DOWN)))
        self.assertTrue(state.dirty)

    def test_no_op_action_leaves_state_clean(self) -> None:
        state = _make_state()
        state.dirty = False
        dispatcher = _make_dispatcher(state)

        dispatcher.dispatch(Action(ActionKind.MOVE_UP))
        dispatcher.dispatch(Action(ActionKind.DELETE))

        self.assertFalse(state.dirty)

    def test_toggle_terminal_round_trip(self) -> None:
        state = _make_state()
        dispatcher = _make_dispatcher(state)
        _press(dispatcher, ActionKind.SELECT_RIGHT_PANE, ActionKind.TOGGLE_TERMINAL)

        self.assertIs(state.focus.focus, Focus.TERMINAL)
        _press(dispatcher, ActionKind.TOGGLE_TERMINAL)
        self.assertIs(state.focus.focus, Focus.RIGHT)

    def test_resize_stores_geometry_and_refits_offsets(self) -> None:
        state = _make_state(height=40)
        dispatcher = _make_dispatcher(state)
        _press(dispatcher, ActionKind.END)
        state.terminal.append_output(str(i) for i in range(50))
        state.terminal.scroll_offset = 45

        dispatcher.dispatch(Action.resize(80, 12))

        rows = state.layout().pane_rows
        self.assertEqual((state.width, state.height), (80, 12))
        self.assertLessEqual(state.left.scroll_offset, state.left.cursor)
        self.assertLess(state.left.cursor, state.left.scroll_offset + rows)
        self.assertLessEqual(state.terminal.scroll_offset, state.terminal.max_scroll_offset(state.layout().terminal_output_rows))


class PaneActionTests(unittest.TestCase):
    def test_arrows_move_only_the_focused_pane(self) -> None:
        state = _make_state()
        dispatcher = _make_dispatcher(state)

        _press(dispatcher, ActionKind.MOVE_DOWN, ActionKind.MOVE_DOWN, ActionKind.MOVE_UP)

        self.assertEqual(state.left.cursor, 1)
        self.assertEqual(state.right.cursor, 0)

    def test_select_right_pane_then_move(self) -> None:
        state = _make_state()
        dispatcher = _make_dispatcher(state)

        _press(dispatcher, ActionKind.SELECT_RIGHT_PANE, ActionKind.MOVE_DOWN)

        self.assertIs(state.focus.active_pane, Focus.RIGHT)
        self.assertEqual((state.left.cursor, state.right.cursor), (0, 1))

    def test_switch_pane_alternates(self) -> None:
        state = _make_state()
        dispatcher = _make_dispatcher(state)

        _press(dispatcher, ActionKind.SWITCH_PANE)
        self.assertIs(state.focus.focus, Focus.RIGHT)
        _press(dispatcher, ActionKind.SWITCH_PANE)
        self.assertIs(state.focus.focus, Focus.LEFT)

    def test_page_and_home_end(self) -> None:
        state = _make_state()
        dispatcher = _make_dispatcher(state)
        rows = state.layout().pane_rows

        _press(dispatcher, ActionKind.PAGE_DOWN)
        self.assertEqual(state.left.cursor, rows)
        _press(dispatcher, ActionKind.END)
        self.assertEqual(state.left.cursor, len(state.left.entries) - 1)
        _press(dispatcher, ActionKind.PAGE_UP)
        self.assertEqual(state.left.cursor, len(state.left.entries) - 1 - rows)
        _press(dispatcher, ActionKind.HOME)
        self.assertEqual((state.left.cursor, state.left.scroll_offset), (0, 0))

    def test_enter_directory_and_go_back(self) -> None:
        state = _make_state()
        dispatcher = _make_dispatcher(state)

        _press(dispatcher, ActionKind.ENTER)
        self.assertEqual(state.left.path, "/root/docs")
        _press(dispatcher, ActionKind.MOVE_LEFT)
        self.assertEqual(state.left.path, "/root")
        _press(dispatcher, ActionKind.MOVE_RIGHT)
        self.assertEqual(state.left.path, "/root/docs")
        _press(dispatcher, ActionKind.BACKSPACE)
        self.assertEqual(state.left.path, "/root")
        self.assertEqual(state.left.cursor, 0)

    def test_enter_file_appends_message_to_terminal(self) -> None:
        state = _make_state()
        dispatcher = _make_dispatcher(state)

        _press(dispatcher, ActionKind.MOVE_DOWN, ActionKind.ENTER)

        self.assertEqual(state.left.path, "/root")
        self.assertEqual(state.terminal.output_lines, ["file opened: /root/readme.txt"])

    def test_text_input_is_ignored_in_panes(self) -> None:
        state = _make_state()
        dispatcher = _make_dispatcher(state)

        _type(dispatcher, "ls")

        self.assertEqual(state.terminal.input_text, "")


class TerminalActionTests(unittest.TestCase):
    def _terminal_state(self) -> tuple[AppState, InputDispatcher]:
        state = _make_state()
        dispatcher = _make_dispatcher(state)
        _press(dispatcher, ActionKind.TOGGLE_TERMINAL)
        return state, dispatcher

    def test_typing_and_editing(self) -> None:
        state, dispatcher = self._terminal_state()

        _type(dispatcher, "echo hi")
        _press(dispatcher, ActionKind.HOME, ActionKind.DELETE, ActionKind.END, ActionKind.BACKSPACE)
        _press(dispatcher, ActionKind.MOVE_LEFT)
        _type(dispatcher, "X")

        self.assertEqual(state.terminal.input_text, "cho Xh")
        self.assertEqual(state.terminal.edit_cursor, 5)

    def test_pane_keys_do_not_move_panes_while_terminal_focused(self) -> None:
        state, dispatcher = self._terminal_state()

        _press(dispatcher, ActionKind.MOVE_DOWN, ActionKind.SELECT_RIGHT_PANE, ActionKind.SWITCH_PANE)

        self.assertEqual(state.left.cursor, 0)
        self.assertIs(state.focus.focus, Focus.TERMINAL)
        self.assertIs(state.focus.active_pane, Focus.LEFT)

    def test_enter_runs_builtin_and_records_history(self) -> None:
        state, dispatcher = self._terminal_state()

        _type(dispatcher, "echo hello")
        _press(dispatcher, ActionKind.ENTER)

        self.assertEqual(state.terminal.output_lines, ["$ echo hello", "hello"])
        self.assertEqual(state.terminal.history, ["echo hello"])
        self.assertEqual(state.terminal.input_text, "")

    def test_enter_runs_external_commands(self) -> None:
        state, dispatcher = self._terminal_state()

        _type(dispatcher, "uname")
        _press(dispatcher, ActionKind.ENTER)

        self.assertEqual(state.terminal.output_lines, ["$ uname", "ran"])

    def test_blank_enter_only_clears_buffer(self) -> None:
        state, dispatcher = self._terminal_state()

        _type(dispatcher, "  ")
        _press(dispatcher, ActionKind.ENTER)

        self.assertEqual(state.terminal.output_lines, [])
        self.assertEqual(state.terminal.history, [])

    def test_history_recall_with_arrows(self) -> None:
        state, dispatcher = self._terminal_state()
        for line in ("a", "b", "c"):
            _type(dispatcher, f"echo {line}")
            _press(dispatcher, ActionKind.ENTER)

        _press(dispatcher, ActionKind.MOVE_UP, ActionKind.MOVE_UP, ActionKind.MOVE_UP)
        self.assertEqual(state.terminal.input_text, "echo a")
        _press(dispatcher, ActionKind.MOVE_DOWN)
        self.assertEqual(state.terminal.input_text, "echo b")

    def test_page_keys_scroll_output(self) -> None:
        state, dispatcher = self._terminal_state()
        state.terminal.append_output(str(i) for i in range(100))
        rows = state.layout().terminal_output_rows

        _press(dispatcher, ActionKind.PAGE_UP)
        self.assertEqual(state.terminal.scroll_offset, rows)
        _press(dispatcher, ActionKind.PAGE_DOWN)
        self.assertEqual(state.terminal.scroll_offset, 0)

    def test_cd_moves_terminal_only(self) -> None:
        state, dispatcher = self._terminal_state()

        _type(dispatcher, "cd nosuchdir")
        _press(dispatcher, ActionKind.ENTER)

        self.assertEqual(state.terminal.cwd, "/root")
        self.assertEqual(len(state.terminal.output_lines), 2)
        self.assertTrue(state.terminal.output_lines[1].startswith("Error: "))
        self.assertEqual(state.left.path, "/root")


if __name__ == "__main__":
    unittest.main()
