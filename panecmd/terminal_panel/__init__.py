"""Embedded command-line panel: session state and command routing."""

from .commands import CommandError, CommandRouter
from .session import PROMPT, TerminalSession

__all__ = ["CommandError", "CommandRouter", "PROMPT", "TerminalSession"]
