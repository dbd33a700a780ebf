"""Command routing for the terminal panel.

A submitted line is split on whitespace; the first word selects a built-in
handler or falls through to an external program. Handlers return output
lines. Any failure becomes exactly one ``Error: ...`` line and never escapes
:meth:`CommandRouter.route`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import PurePath

from .. import fs
from ..ansi import sanitize_name
from ..process import ExecutionResult, execute
from .session import TerminalSession

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "
LS_LONG_NAME_WIDTH = 20
LS_LONG_SIZE_WIDTH = 10
PING_COUNT = 4

Executor = Callable[[str, list[str], str], ExecutionResult]
Highlighter = Callable[[str, str], "str | None"]
CommandHandler = Callable[[TerminalSession, list[str]], list[str]]


class CommandError(Exception):
    """A built-in command failed; the message becomes the error line."""


@dataclass(frozen=True)
class BuiltinCommand:
    name: str
    usage: str
    summary: str
    handler: CommandHandler


def error_line(message: str) -> str:
    return f"{ERROR_PREFIX}{message}"


def _os_failure(command: str, target: str, exc: OSError) -> CommandError:
    reason = exc.strerror or str(exc)
    return CommandError(f"{command}: {target}: {reason}")


def split_output(data: bytes) -> list[str]:
    """Decode captured process output into display lines."""
    return data.decode("utf-8", errors="replace").splitlines()


class CommandRouter:
    """Classify command lines and run them against a :class:`TerminalSession`.

    Built-ins resolve relative paths against ``session.cwd``; the process
    working directory is never consulted or changed.
    """

    def __init__(
        self,
        executor: Executor = execute,
        highlighter: Highlighter | None = None,
    ) -> None:
        self._executor = executor
        self._highlighter = highlighter
        self._builtins: dict[str, BuiltinCommand] = {}
        for builtin in (
            BuiltinCommand("ls", "ls [-a] [-l] [dir]", "list directory entries", self._ls),
            BuiltinCommand("clear", "clear", "clear the terminal output", self._clear),
            BuiltinCommand("pwd", "pwd", "show the current directory", self._pwd),
            BuiltinCommand("cd", "cd <dir>", "change the current directory", self._cd),
            BuiltinCommand("cat", "cat <file>", "show file contents", self._cat),
            BuiltinCommand("mkdir", "mkdir <dir>...", "create directories", self._mkdir),
            BuiltinCommand("touch", "touch <file>...", "create empty files", self._touch),
            BuiltinCommand("rm", "rm <file>...", "remove files", self._rm),
            BuiltinCommand("cp", "cp <src> <dst>", "copy a file", self._cp),
            BuiltinCommand("mv", "mv <src> <dst>", "move or rename", self._mv),
            BuiltinCommand("echo", "echo <text>", "print text", self._echo),
            BuiltinCommand("ping", "ping <host>", "check that a host answers", self._ping),
            BuiltinCommand("help", "help", "show this help", self._help),
        ):
            self._builtins[builtin.name] = builtin

    @property
    def builtin_names(self) -> tuple[str, ...]:
        return tuple(self._builtins)

    def is_builtin(self, command: str) -> bool:
        return command in self._builtins

    def route(self, session: TerminalSession, line: str) -> list[str]:
        """Run ``line`` and return the lines it printed."""
        tokens = line.split()
        if not tokens:
            return []
        command, arguments = tokens[0], tokens[1:]
        builtin = self._builtins.get(command)
        if builtin is None:
            logger.debug("external %r %r in %s", command, arguments, session.cwd)
            return self._run_external(session, command, arguments)

        logger.debug("builtin %r %r in %s", command, arguments, session.cwd)
        try:
            return builtin.handler(session, arguments)
        except CommandError as exc:
            return [error_line(str(exc))]
        except OSError as exc:
            target = exc.filename if exc.filename is not None else " ".join(arguments)
            return [error_line(str(_os_failure(command, str(target), exc)))]

    # -- helpers -----------------------------------------------------------

    def _usage(self, command: str) -> CommandError:
        return CommandError(f"usage: {self._builtins[command].usage}")

    def _run_external(self, session: TerminalSession, command: str, arguments: list[str]) -> list[str]:
        result = self._executor(command, arguments, session.cwd)
        lines = split_output(result.output)
        if result.spawn_error is not None:
            lines.append(error_line(f"{command}: {result.spawn_error}"))
        elif not result.succeeded:
            lines.append(error_line(f"{command}: exit status {result.exit_code}"))
        return lines

    # -- built-ins ---------------------------------------------------------

    def _pwd(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        return [session.cwd]

    def _ls(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        show_all = False
        long_format = False
        targets: list[str] = []
        for argument in arguments:
            if argument.startswith("-") and len(argument) > 1:
                for flag in argument[1:]:
                    if flag == "a":
                        show_all = True
                    elif flag == "l":
                        long_format = True
                    else:
                        raise CommandError(f"ls: invalid option -- '{flag}'")
            else:
                targets.append(argument)
        if len(targets) > 1:
            raise self._usage("ls")

        shown = targets[0] if targets else "."
        path = fs.join_path(session.cwd, shown)
        if os.path.exists(path) and not os.path.isdir(path):
            try:
                size = os.stat(path).st_size
            except OSError as exc:
                raise _os_failure("ls", shown, exc) from exc
            entries = [fs.Entry(name=shown, is_dir=False, size=size)]
        else:
            try:
                entries = fs.list_directory(path)
            except OSError as exc:
                raise _os_failure("ls", shown, exc) from exc

        lines: list[str] = []
        for entry in entries:
            if not show_all and entry.name.startswith("."):
                continue
            name = sanitize_name(entry.display_name)
            if long_format:
                size_label = str(entry.size) if entry.size is not None else "?"
                lines.append(f"{name:<{LS_LONG_NAME_WIDTH}} {size_label:>{LS_LONG_SIZE_WIDTH}}")
            else:
                lines.append(name)
        return lines

    def _cd(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        if len(arguments) != 1:
            raise self._usage("cd")
        target = fs.join_path(session.cwd, arguments[0])
        if not os.path.exists(target):
            raise CommandError(f"cd: {arguments[0]}: No such file or directory")
        if not os.path.isdir(target):
            raise CommandError(f"cd: {arguments[0]}: Not a directory")
        if not os.access(target, os.X_OK):
            raise CommandError(f"cd: {arguments[0]}: Permission denied")
        session.cwd = target
        return []

    def _cat(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        if len(arguments) != 1:
            raise self._usage("cat")
        path = fs.join_path(session.cwd, arguments[0])
        try:
            data = fs.read_file(path)
        except OSError as exc:
            raise _os_failure("cat", arguments[0], exc) from exc
        text = fs.decode_text(data)
        if self._highlighter is not None:
            colored = self._highlighter(text, PurePath(path).name)
            if colored is not None:
                text = colored
        return text.splitlines()

    def _apply_each(
        self,
        command: str,
        session: TerminalSession,
        arguments: list[str],
        operation: Callable[[str], None],
    ) -> list[str]:
        if not arguments:
            raise self._usage(command)
        for argument in arguments:
            try:
                operation(fs.join_path(session.cwd, argument))
            except OSError as exc:
                raise _os_failure(command, argument, exc) from exc
        return []

    def _mkdir(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        return self._apply_each("mkdir", session, arguments, fs.create_directory)

    def _touch(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        return self._apply_each("touch", session, arguments, fs.create_file)

    def _rm(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        return self._apply_each("rm", session, arguments, fs.remove_file)

    def _transfer(
        self,
        command: str,
        session: TerminalSession,
        arguments: list[str],
        operation: Callable[[str, str], None],
    ) -> list[str]:
        if len(arguments) != 2:
            raise self._usage(command)
        source, destination = arguments
        source_path = fs.join_path(session.cwd, source)
        try:
            operation(source_path, fs.join_path(session.cwd, destination))
        except OSError as exc:
            source_failed = exc.filename == source_path or not os.path.lexists(source_path)
            failed = source if source_failed else destination
            raise _os_failure(command, failed, exc) from exc
        return []

    def _cp(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        return self._transfer("cp", session, arguments, fs.copy)

    def _mv(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        return self._transfer("mv", session, arguments, fs.rename)

    def _echo(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        return [" ".join(arguments)]

    def _clear(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        session.clear_output()
        return []

    def _ping(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        if len(arguments) != 1:
            raise self._usage("ping")
        return self._run_external(session, "ping", ["-c", str(PING_COUNT), arguments[0]])

    def _help(self, session: TerminalSession, arguments: list[str]) -> list[str]:
        width = max(len(builtin.usage) for builtin in self._builtins.values())
        lines = ["Available commands:"]
        for builtin in self._builtins.values():
            lines.append(f"  {builtin.usage:<{width}}  - {builtin.summary}")
        lines.append("Anything else runs as an external program in the current directory.")
        return lines
