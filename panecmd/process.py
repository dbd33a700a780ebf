"""External program execution for commands that are not built in.

Runs synchronously with stdout and stderr merged into one captured stream.
The child gets ``/dev/null`` as stdin so it can never read from the raw TTY.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one external command run."""

    output: bytes
    succeeded: bool
    exit_code: int | None = None
    spawn_error: str | None = None


def execute(command: str, arguments: list[str], working_directory: str) -> ExecutionResult:
    """Run ``command`` with ``arguments`` in ``working_directory``.

    Captured output is returned even when the program fails. Spawn failures
    (missing executable, bad working directory, permission) are reported in
    ``spawn_error`` instead of raising.
    """
    try:
        proc = subprocess.run(
            [command, *arguments],
            cwd=working_directory,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except FileNotFoundError as exc:
        if exc.filename == working_directory:
            reason = f"{working_directory}: no such directory"
        else:
            reason = "command not found"
        logger.info("spawn failed for %r: %s", command, reason)
        return ExecutionResult(output=b"", succeeded=False, spawn_error=reason)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        logger.info("spawn failed for %r: %s", command, reason)
        return ExecutionResult(output=b"", succeeded=False, spawn_error=reason)

    if proc.returncode != 0:
        logger.info("%r exited with status %d", command, proc.returncode)
    return ExecutionResult(
        output=proc.stdout or b"",
        succeeded=proc.returncode == 0,
        exit_code=proc.returncode,
    )
