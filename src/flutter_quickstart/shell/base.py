"""BaseExecutor ABC and the CommandResult dataclass.

Every external program flutter-quickstart touches (flutter, brew, the
user's shell) goes through a BaseExecutor, so tests can substitute a
recording fake and assert on the exact invocation sequence.
"""

from __future__ import annotations

import shlex
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from flutter_quickstart.errors import CommandFailedError


@dataclass
class CommandResult:
    """Outcome of a single external command invocation.

    stdout and stderr are empty strings when output was streamed to
    the terminal instead of captured.
    """

    command: str
    args: list[str] = field(default_factory=list)
    exit_code: int = 0
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]


class BaseExecutor(ABC):
    """Abstract base class for running external commands.

    Subclasses implement run() and which(). Neither method raises for
    a missing program: run() reports it through the exit code and
    which() returns None.
    """

    @abstractmethod
    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        cwd: Path | None = None,
        capture: bool = False,
    ) -> CommandResult:
        """Run command with args and block until it exits.

        Args:
            command: Program name or path.
            args: Arguments passed verbatim (no shell parsing).
            cwd: Working directory for the child process.
            capture: If True, capture stdout/stderr into the result
                instead of streaming them to the terminal.

        Returns:
            CommandResult with the exit code and any captured output.
        """
        ...

    @abstractmethod
    def which(self, name: str) -> str | None:
        """Return the resolved path of name on PATH, or None if absent."""
        ...


def check_result(result: CommandResult, strict: bool, console: Console) -> None:
    """Enforce the exit code policy for a finished command.

    Args:
        result: Outcome of the command.
        strict: If True, a non-zero exit raises; otherwise it is
            reported as a warning and the caller continues.
        console: Rich console for the warning.

    Raises:
        CommandFailedError: If the command failed and strict is True.
    """
    if result.ok:
        return
    if strict:
        raise CommandFailedError(result)
    console.print(
        f"[yellow]Warning: {shlex.join(result.argv)} exited with code "
        f"{result.exit_code}; continuing.[/yellow]",
        highlight=False,
    )
