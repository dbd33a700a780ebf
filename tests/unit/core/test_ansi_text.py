"""Tests for ANSI-aware width measurement, clipping and sanitising."""

from __future__ import annotations

import unittest

from panecmd.ansi import (
    char_display_width,
    clip_ansi_line,
    clip_plain_from_left,
    display_width,
    fit_ansi_line,
    sanitize_line,
    sanitize_name,
    strip_ansi,
)


class WidthTests(unittest.TestCase):
    def test_char_widths(self) -> None:
        self.assertEqual(char_display_width("a", 0), 1)
        self.assertEqual(char_display_width("日", 0), 2)
        self.assertEqual(char_display_width("\u0301", 0), 0)
        self.assertEqual(char_display_width("\t", 3), 5)

    def test_display_width_ignores_sgr(self) -> None:
        self.assertEqual(display_width("\x1b[1;31mab日\x1b[0m"), 4)
        self.assertEqual(strip_ansi("\x1b[1;31mab\x1b[0m"), "ab")


class ClipTests(unittest.TestCase):
    def test_clip_preserves_escapes_and_stops_before_wide_overflow(self) -> None:
        self.assertEqual(clip_ansi_line("\x1b[31mab日本\x1b[0m", 3), "\x1b[31mab")
        self.assertEqual(clip_ansi_line("abc", 0), "")

    def test_fit_pads_and_resets(self) -> None:
        self.assertEqual(fit_ansi_line("ab", 4), "ab  ")
        self.assertEqual(fit_ansi_line("\x1b[31mabcdef", 3), "\x1b[31mabc\x1b[0m")
        self.assertEqual(fit_ansi_line("a日本", 4), "a日 ")
        self.assertEqual(fit_ansi_line("anything", 0), "")

    def test_clip_plain_from_left_keeps_tail(self) -> None:
        self.assertEqual(clip_plain_from_left("/usr/local/bin", 5), "l/bin")
        self.assertEqual(clip_plain_from_left("short", 10), "short")
        self.assertEqual(clip_plain_from_left("日本語", 3), "語")
        self.assertEqual(clip_plain_from_left("abc", 0), "")


class SanitizeTests(unittest.TestCase):
    def test_keeps_colour_and_drops_cursor_control(self) -> None:
        self.assertEqual(sanitize_line("\x1b[2K\x1b[32mok\x1b[0m\x1b[1A"), "\x1b[32mok\x1b[0m")

    def test_drops_osc_title_and_bell(self) -> None:
        self.assertEqual(sanitize_line("\x1b]2;title\x1b\\done\x07"), "done")

    def test_carriage_return_keeps_last_segment(self) -> None:
        self.assertEqual(sanitize_line("10%\r50%\r100%"), "100%")
        self.assertEqual(sanitize_line("text\r"), "text")

    def test_keeps_tabs_and_drops_other_controls(self) -> None:
        self.assertEqual(sanitize_line("a\tb\x00c\x08d"), "a\tbcd")

    def test_lone_escape_is_removed(self) -> None:
        self.assertEqual(sanitize_line("a\x1b"), "a")


class SanitizeNameTests(unittest.TestCase):
    def test_plain_names_are_unchanged(self) -> None:
        self.assertEqual(sanitize_name("readme.txt"), "readme.txt")
        self.assertEqual(sanitize_name("\u65e5\u672c.txt"), "\u65e5\u672c.txt")

    def test_escape_sequences_are_removed(self) -> None:
        self.assertEqual(sanitize_name("x\x1b[2Jy"), "xy")
        self.assertEqual(sanitize_name("\x1b[31mred\x1b[0m"), "red")

    def test_controls_become_question_marks(self) -> None:
        self.assertEqual(sanitize_name("a\nb\tc\x7fd\x9be"), "a?b?c?d?e")
        self.assertEqual(sanitize_name("end\x1b"), "end?")


if __name__ == "__main__":
    unittest.main()
