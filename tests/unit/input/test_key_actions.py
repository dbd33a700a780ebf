from __future__ import annotations

import unittest

from panecmd.input import Action, ActionBinding, ActionKind, ActionRegistry, translate_key


class TranslateKeyTests(unittest.TestCase):
    def test_global_keys(self) -> None:
        self.assertEqual(translate_key("CTRL_Q"), Action(ActionKind.QUIT))
        self.assertEqual(translate_key("CTRL_C"), Action(ActionKind.QUIT))
        self.assertEqual(translate_key("TAB"), Action(ActionKind.TOGGLE_TERMINAL))
        self.assertEqual(translate_key("ALT_LEFT"), Action(ActionKind.SELECT_LEFT_PANE))
        self.assertEqual(translate_key("ALT_RIGHT"), Action(ActionKind.SELECT_RIGHT_PANE))
        self.assertEqual(translate_key("SHIFT_TAB"), Action(ActionKind.SWITCH_PANE))

    def test_navigation_and_editing_keys(self) -> None:
        expected = {
            "UP": ActionKind.MOVE_UP,
            "DOWN": ActionKind.MOVE_DOWN,
            "LEFT": ActionKind.MOVE_LEFT,
            "RIGHT": ActionKind.MOVE_RIGHT,
            "PAGE_UP": ActionKind.PAGE_UP,
            "PAGE_DOWN": ActionKind.PAGE_DOWN,
            "HOME": ActionKind.HOME,
            "CTRL_A": ActionKind.HOME,
            "END": ActionKind.END,
            "CTRL_E": ActionKind.END,
            "ENTER": ActionKind.ENTER,
            "BACKSPACE": ActionKind.BACKSPACE,
            "DELETE": ActionKind.DELETE,
        }
        for key, kind in expected.items():
            with self.subTest(key=key):
                self.assertEqual(translate_key(key), Action(kind))

    def test_printable_characters_insert_text(self) -> None:
        self.assertEqual(translate_key("a"), Action.insert("a"))
        self.assertEqual(translate_key(" "), Action.insert(" "))
        self.assertEqual(translate_key("日"), Action.insert("日"))

    def test_unknown_and_empty_keys_are_ignored(self) -> None:
        self.assertIsNone(translate_key(""))
        self.assertIsNone(translate_key("ESC"))
        self.assertIsNone(translate_key("\x00"))

    def test_resize_carries_geometry(self) -> None:
        action = Action.resize(100, 30)

        self.assertEqual((action.kind, action.width, action.height), (ActionKind.RESIZE, 100, 30))


class ActionRegistryTests(unittest.TestCase):
    def test_dispatch_routes_all_bound_kinds_to_handler(self) -> None:
        seen: list[ActionKind] = []
        registry = ActionRegistry().register_binding(
            ActionBinding((ActionKind.ENTER, ActionKind.MOVE_RIGHT), lambda action: seen.append(action.kind) or True)
        )

        self.assertTrue(registry.dispatch(Action(ActionKind.ENTER)))
        self.assertTrue(registry.dispatch(Action(ActionKind.MOVE_RIGHT)))
        self.assertEqual(seen, [ActionKind.ENTER, ActionKind.MOVE_RIGHT])

    def test_unbound_kind_returns_none(self) -> None:
        registry = ActionRegistry()

        self.assertIsNone(registry.dispatch(Action(ActionKind.QUIT)))

    def test_later_binding_overrides_earlier(self) -> None:
        registry = ActionRegistry().register_bindings(
            ActionBinding((ActionKind.HOME,), lambda _a: False),
            ActionBinding((ActionKind.HOME,), lambda _a: True),
        )

        self.assertTrue(registry.dispatch(Action(ActionKind.HOME)))


if __name__ == "__main__":
    unittest.main()
