"""flutter-quickstart run -- provision the toolchain, then scaffold a project.

Checks for flutter (offering to install it), asks for the project name,
architecture opt-in, and packages, then creates the project. Exits 1 if
the toolchain is declined or cannot be installed, or a step fails.
"""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from flutter_quickstart.cli.common import build_executor, load_config_or_exit
from flutter_quickstart.cli.output import render_answers, render_banner, report_error
from flutter_quickstart.errors import QuickstartError
from flutter_quickstart.prompts.interactive import InteractivePrompter
from flutter_quickstart.provision.toolchain import ProvisionOutcome, ToolchainProvisioner
from flutter_quickstart.scaffold.project import ProjectScaffolder


def run(
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Path to a flutter_quickstart.yaml config file"
    ),
) -> None:
    """Initialize a new Flutter project with clean architecture structure."""
    console = Console()
    tool_config = load_config_or_exit(config)
    render_banner(console)

    executor = build_executor(console)
    prompter = InteractivePrompter(console=console)

    try:
        # 1. Make sure the toolchain is available
        provisioner = ToolchainProvisioner(executor, prompter, tool_config, console)
        if provisioner.ensure_toolchain() is ProvisionOutcome.DECLINED:
            raise typer.Exit(code=1)

        # 2. Collect answers
        scaffolder = ProjectScaffolder(executor, prompter, tool_config, console=console)
        answers = scaffolder.collect_answers()
        render_answers(answers, console)

        # 3. Create project, directories, and dependencies
        scaffolder.scaffold(answers)
    except QuickstartError as e:
        report_error(e)
        raise typer.Exit(code=1)
    except ValidationError as e:
        typer.echo(f"Error: Invalid answers:\n{e}", err=True)
        raise typer.Exit(code=1)
