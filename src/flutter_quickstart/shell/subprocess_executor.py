"""BaseExecutor backed by subprocess.run and shutil.which."""

from __future__ import annotations

import shlex
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from flutter_quickstart.shell.base import BaseExecutor, CommandResult

# Conventional shell exit status for "command not found".
COMMAND_NOT_FOUND = 127


class SubprocessExecutor(BaseExecutor):
    """Runs commands as argv lists in a child process, never through a shell.

    Args:
        console: Rich console used to echo each command before it runs.
            Pass None to run silently.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        cwd: Path | None = None,
        capture: bool = False,
    ) -> CommandResult:
        argv = [command, *args]
        if self._console is not None:
            self._console.print(f"[dim]$ {shlex.join(argv)}[/dim]", highlight=False)

        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=capture,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            return CommandResult(
                command=command,
                args=list(args),
                exit_code=COMMAND_NOT_FOUND,
                stderr=str(exc),
            )

        return CommandResult(
            command=command,
            args=list(args),
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def which(self, name: str) -> str | None:
        return shutil.which(name)
