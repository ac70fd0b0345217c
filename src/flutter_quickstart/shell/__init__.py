"""External command execution boundary."""

from flutter_quickstart.shell.base import BaseExecutor, CommandResult
from flutter_quickstart.shell.subprocess_executor import SubprocessExecutor

__all__ = ["BaseExecutor", "CommandResult", "SubprocessExecutor"]
