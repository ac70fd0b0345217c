"""Rich terminal output for the scaffolding session."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer
from rich import box
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from flutter_quickstart.errors import QuickstartError
    from flutter_quickstart.models.answers import UserAnswers


def render_banner(console: Console) -> None:
    console.print("[blue]Welcome to the FlutterQuickStart CLI![/blue]")


def render_answers(answers: UserAnswers, console: Console) -> None:
    """Render the collected answers as a compact key-value table.

    Args:
        answers: Answers about to be applied.
        console: Rich Console for output.
    """
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("Project", answers.project_name)
    table.add_row(
        "Architecture",
        "[green]clean architecture[/green]" if answers.clean_architecture else "[dim]none[/dim]",
    )
    deps = ", ".join(answers.dependencies) if answers.dependencies else "[dim]none[/dim]"
    table.add_row("Dependencies", deps)

    console.print()
    console.print(table)


def report_error(error: QuickstartError) -> None:
    """Write an error line to stderr."""
    typer.echo(f"Error: {error}", err=True)
