"""Frame rendering for the panel/terminal view."""

from .frame import render_frame, render_frame_lines, selected_with_ansi

__all__ = ["render_frame", "render_frame_lines", "selected_with_ansi"]
