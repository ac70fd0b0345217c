"""Toolchain detection and installation.

ToolchainProvisioner checks whether the Flutter binary is on PATH and,
if the user agrees, installs it through the OS package manager. After
installing, it makes sure the SDK's bin directory is on PATH by
appending an export line to the user's shell profile.
"""

from __future__ import annotations

import enum
import os
from pathlib import Path

from rich.console import Console

from flutter_quickstart.errors import PackageManagerNotFoundError
from flutter_quickstart.models.config import ToolConfig
from flutter_quickstart.prompts.base import BasePrompter
from flutter_quickstart.shell.base import BaseExecutor, check_result


class ProvisionOutcome(str, enum.Enum):
    """Terminal state of ToolchainProvisioner.ensure_toolchain()."""

    ALREADY_PRESENT = "already_present"
    INSTALLED = "installed"
    DECLINED = "declined"


class ToolchainProvisioner:
    """Detects and, on request, installs the Flutter toolchain.

    Args:
        executor: Runs package-manager and shell commands.
        prompter: Asks whether a missing toolchain should be installed.
        config: Toolchain, package manager, and shell profile settings.
        console: Rich console for status messages.
    """

    def __init__(
        self,
        executor: BaseExecutor,
        prompter: BasePrompter,
        config: ToolConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.executor = executor
        self.prompter = prompter
        self.config = config or ToolConfig()
        self.console = console or Console()

    def detect(self) -> bool:
        """Return True if the toolchain binary resolves on PATH."""
        return self.executor.which(self.config.toolchain.binary) is not None

    def ensure_toolchain(self) -> ProvisionOutcome:
        """Detect the toolchain and install it if missing and the user agrees.

        Returns:
            ALREADY_PRESENT, INSTALLED, or DECLINED. Deciding whether a
            decline is fatal is left to the caller.

        Raises:
            PackageManagerNotFoundError: If installation was accepted but
                no package manager is available.
            CommandFailedError: If the install command fails and exit
                codes are checked.
        """
        name = self.config.toolchain.binary
        if self.detect():
            self.console.print(f"[green]{name} is already installed.[/green]")
            return ProvisionOutcome.ALREADY_PRESENT

        self.console.print(f"[red]{name} is not installed on your system.[/red]")
        if not self.prompter.confirm_install():
            self.console.print(f"[yellow]{name} installation is required to proceed.[/yellow]")
            return ProvisionOutcome.DECLINED

        self.provision()
        return ProvisionOutcome.INSTALLED

    def provision(self) -> None:
        """Install the toolchain through the package manager, then fix up PATH.

        Raises:
            PackageManagerNotFoundError: If the package manager is not on PATH.
            CommandFailedError: If the install command fails and exit
                codes are checked.
        """
        pm = self.config.package_manager
        toolchain = self.config.toolchain
        self.console.print(f"[green]Installing {toolchain.binary}...[/green]")

        if self.executor.which(pm.binary) is None:
            raise PackageManagerNotFoundError(pm.binary, toolchain.install_url, toolchain.binary)

        result = self.executor.run(pm.binary, pm.install_args())
        check_result(result, self.config.check_exit_codes, self.console)

        self.ensure_path_configured()

    def ensure_path_configured(self) -> bool:
        """Append the SDK bin directory to the shell profile if still unresolvable.

        The profile line only affects shells started after this run; the
        `source` call runs in a child shell and cannot change the parent.
        PATH is also extended in os.environ so later commands in this
        process can find the toolchain.

        Returns:
            True if the shell profile was amended, False if the toolchain
            was already resolvable.
        """
        name = self.config.toolchain.binary
        if self.detect():
            self.console.print(f"[green]{name} is already in your PATH.[/green]")
            return False

        sdk_bin = self.config.toolchain.sdk_bin
        profile = self.config.shell_profile_path()
        self._append_path_export(profile, sdk_bin)

        os.environ["PATH"] = f"{os.environ.get('PATH', '')}{os.pathsep}{sdk_bin}"

        # Best-effort reload; exit status ignored.
        self.executor.run(_shell_for_profile(profile), ["-c", f'source "{profile}"'])

        self.console.print(f"[green]{name} has been installed and added to your PATH.[/green]")
        self.console.print(
            f"[dim]Open a new terminal or run `source {self.config.shell_profile}` "
            f"to use {name} in your current shell.[/dim]"
        )
        return True

    def _append_path_export(self, profile: Path, sdk_bin: str) -> None:
        profile.parent.mkdir(parents=True, exist_ok=True)
        content = profile.read_text(encoding="utf-8") if profile.exists() else ""
        prefix = "\n" if content and not content.endswith("\n") else ""
        with profile.open("a", encoding="utf-8") as fh:
            fh.write(f'{prefix}export PATH="$PATH:{sdk_bin}"\n')


def _shell_for_profile(profile: Path) -> str:
    """Pick the shell that understands the given rc file."""
    name = profile.name
    if "zsh" in name:
        return "zsh"
    if "bash" in name:
        return "bash"
    return "sh"
