"""Exception hierarchy for flutter-quickstart.

Every error the CLI knows how to report derives from QuickstartError,
so command handlers can print a message and exit with code 1.
"""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flutter_quickstart.shell.base import CommandResult


class QuickstartError(Exception):
    """Base class for errors surfaced to the user by the CLI."""


class PackageManagerNotFoundError(QuickstartError):
    """Raised when the toolchain is absent and cannot be installed automatically.

    Attributes:
        package_manager: Name of the package manager that was looked up.
        install_url: Where the user can find manual install instructions.
        toolchain: Name of the toolchain that needs installing.
    """

    def __init__(self, package_manager: str, install_url: str, toolchain: str = "flutter") -> None:
        self.package_manager = package_manager
        self.install_url = install_url
        self.toolchain = toolchain
        super().__init__(
            f"{package_manager} is not installed. You need to install {toolchain} manually. "
            f"Visit {install_url} to download and install {toolchain}."
        )


class CommandFailedError(QuickstartError):
    """Raised when a checked external command exits with a non-zero status."""

    def __init__(self, result: CommandResult) -> None:
        self.result = result
        argv = shlex.join([result.command, *result.args])
        detail = f": {result.stderr.strip()}" if result.stderr.strip() else ""
        super().__init__(f"`{argv}` failed with exit code {result.exit_code}{detail}")


class ProjectCreationError(QuickstartError):
    """Raised when the project directory is missing after project creation."""

    def __init__(self, project_root: str) -> None:
        self.project_root = project_root
        super().__init__(f"Project directory was not created: {project_root}")


class InvalidProjectNameError(QuickstartError, ValueError):
    """Raised when a project name is empty or contains a path separator."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid project name {name!r}: {reason}")
