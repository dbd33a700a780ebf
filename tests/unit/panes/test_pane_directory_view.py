"""Tests for the directory pane model.

Uses real temporary directories for navigation and a stub lister for cursor
and scroll arithmetic on long listings.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from panecmd.fs import Entry
from panecmd.panes import DirectoryView


def _stub_lister(count: int):
    entries = [Entry(name=f"item{i:03d}", is_dir=False, size=i) for i in range(count)]
    return lambda _path: list(entries)


class DirectoryViewNavigationTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "docs").mkdir()
        (self.root / "docs" / "guide.md").write_text("guide\n", encoding="utf-8")
        (self.root / "readme.txt").write_text("hello\n", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_open_lists_entries_sorted_by_name(self) -> None:
        view = DirectoryView.open(str(self.root))

        self.assertEqual([entry.name for entry in view.entries], ["docs", "readme.txt"])
        self.assertTrue(view.entries[0].is_dir)
        self.assertEqual((view.cursor, view.scroll_offset), (0, 0))

    def test_enter_directory_then_up_resets_cursor_both_ways(self) -> None:
        view = DirectoryView.open(str(self.root))

        message = view.enter_selected()

        self.assertIsNone(message)
        self.assertEqual(view.path, str(self.root / "docs"))
        self.assertEqual([entry.name for entry in view.entries], ["guide.md"])
        self.assertEqual(view.cursor, 0)

        view.navigate_up()

        self.assertEqual(view.path, str(self.root))
        self.assertEqual(view.cursor, 0)
        self.assertEqual(view.scroll_offset, 0)

    def test_entering_a_file_reports_it_without_moving(self) -> None:
        view = DirectoryView.open(str(self.root))
        view.move_cursor(1, viewport_rows=10)

        message = view.enter_selected()

        self.assertEqual(message, f"file opened: {self.root / 'readme.txt'}")
        self.assertEqual(view.path, str(self.root))
        self.assertEqual(view.cursor, 1)

    def test_navigate_up_at_root_is_idempotent(self) -> None:
        view = DirectoryView.open(os.sep)
        before = [entry.name for entry in view.entries]

        view.navigate_up()
        view.navigate_up()

        self.assertEqual(view.path, os.sep)
        self.assertEqual([entry.name for entry in view.entries], before)

    def test_unreadable_directory_shows_as_empty(self) -> None:
        view = DirectoryView.open(str(self.root / "missing"))

        self.assertEqual(view.entries, [])
        self.assertIsNone(view.selected)
        self.assertIsNone(view.enter_selected())

    def test_reload_picks_up_new_entries(self) -> None:
        view = DirectoryView.open(str(self.root))
        (self.root / "zeta").mkdir()

        view.reload()

        self.assertEqual([entry.name for entry in view.entries], ["docs", "readme.txt", "zeta"])


class DirectoryViewCursorTests(unittest.TestCase):
    def test_move_cursor_clamps_at_both_ends(self) -> None:
        view = DirectoryView.open("/virtual", lister=_stub_lister(5))

        view.move_cursor(-3, viewport_rows=3)
        self.assertEqual(view.cursor, 0)

        view.move_cursor(99, viewport_rows=3)
        self.assertEqual(view.cursor, 4)
        self.assertEqual(view.scroll_offset, 2)

    def test_cursor_stays_inside_viewport_for_move_sequences(self) -> None:
        view = DirectoryView.open("/virtual", lister=_stub_lister(40))
        rows = 7
        for delta in [1, 1, 5, 9, -2, 20, 3, -30, 12, -1, 7, 7, 7, -4]:
            view.move_cursor(delta, rows)
            self.assertGreaterEqual(view.cursor, 0)
            self.assertLessEqual(view.cursor, 39)
            self.assertLessEqual(view.scroll_offset, view.cursor)
            self.assertLess(view.cursor, view.scroll_offset + rows)

    def test_first_and_last(self) -> None:
        view = DirectoryView.open("/virtual", lister=_stub_lister(12))

        view.move_to_last(viewport_rows=5)
        self.assertEqual((view.cursor, view.scroll_offset), (11, 7))

        view.move_to_first(viewport_rows=5)
        self.assertEqual((view.cursor, view.scroll_offset), (0, 0))

    def test_empty_listing_keeps_cursor_at_zero(self) -> None:
        view = DirectoryView.open("/virtual", lister=_stub_lister(0))

        view.move_cursor(3, viewport_rows=4)

        self.assertEqual((view.cursor, view.scroll_offset), (0, 0))

    def test_ensure_visible_after_viewport_grows_pulls_offset_back(self) -> None:
        view = DirectoryView.open("/virtual", lister=_stub_lister(10))
        view.move_to_last(viewport_rows=2)
        self.assertEqual(view.scroll_offset, 8)

        view.ensure_visible(viewport_rows=6)

        self.assertEqual(view.scroll_offset, 4)
        self.assertLess(view.cursor, view.scroll_offset + 6)

    def test_ensure_visible_after_viewport_shrinks_follows_cursor(self) -> None:
        view = DirectoryView.open("/virtual", lister=_stub_lister(10))
        view.move_cursor(6, viewport_rows=10)

        view.ensure_visible(viewport_rows=3)

        self.assertEqual(view.scroll_offset, 4)


if __name__ == "__main__":
    unittest.main()
