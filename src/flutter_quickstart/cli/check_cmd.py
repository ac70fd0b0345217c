"""flutter-quickstart check-flutter -- check for flutter and install it if missing.

A declined install only prints a warning unless check_decline_is_fatal
is set in the config, in which case it exits 1 like `run` does.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from flutter_quickstart.cli.common import build_executor, load_config_or_exit
from flutter_quickstart.cli.output import report_error
from flutter_quickstart.errors import QuickstartError
from flutter_quickstart.prompts.interactive import InteractivePrompter
from flutter_quickstart.provision.toolchain import ProvisionOutcome, ToolchainProvisioner


def check_flutter(
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Path to a flutter_quickstart.yaml config file"
    ),
) -> None:
    """Check if Flutter is installed, and install it if not."""
    console = Console()
    tool_config = load_config_or_exit(config)

    provisioner = ToolchainProvisioner(
        build_executor(console), InteractivePrompter(console=console), tool_config, console
    )
    try:
        outcome = provisioner.ensure_toolchain()
    except QuickstartError as e:
        report_error(e)
        raise typer.Exit(code=1)

    if outcome is ProvisionOutcome.DECLINED and tool_config.check_decline_is_fatal:
        raise typer.Exit(code=1)
