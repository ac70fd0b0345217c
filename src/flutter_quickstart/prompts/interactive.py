"""Terminal prompter built on typer prompts and a Rich catalog table.

The dependency multi-select is a numbered table followed by a single
free-text prompt: comma-separated numbers or labels, blank for the
pre-selected defaults, `none` for nothing.
"""

from __future__ import annotations

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from flutter_quickstart.errors import InvalidProjectNameError
from flutter_quickstart.models.answers import UserAnswers, validate_project_name
from flutter_quickstart.models.catalog import DependencyChoice, default_selection
from flutter_quickstart.prompts.base import BasePrompter

_NONE_TOKENS = {"none", "-"}


def parse_selection(raw: str, catalog: tuple[DependencyChoice, ...]) -> list[str]:
    """Turn a multi-select reply into catalog values, in the order given.

    Args:
        raw: User reply, e.g. "1,3" or "http, equatable". Blank selects
            the catalog defaults; "none" selects nothing.
        catalog: Choices the reply refers to.

    Returns:
        Selected catalog values with duplicates removed.

    Raises:
        ValueError: If a token matches no catalog entry.
    """
    text = raw.strip()
    if not text:
        return default_selection(catalog)
    if text.lower() in _NONE_TOKENS:
        return []

    by_name: dict[str, DependencyChoice] = {}
    for choice in catalog:
        by_name[choice.label.lower()] = choice
        by_name[choice.value.lower()] = choice

    selected: list[str] = []
    for token in (t.strip() for t in text.split(",")):
        if not token:
            continue
        if token.isdigit():
            index = int(token)
            if not 1 <= index <= len(catalog):
                raise ValueError(f"No dependency numbered {index} (choose 1-{len(catalog)})")
            choice = catalog[index - 1]
        else:
            match = by_name.get(token.lower())
            if match is None:
                raise ValueError(f"Unknown dependency: {token}")
            choice = match
        if choice.value not in selected:
            selected.append(choice.value)
    return selected


def render_catalog(catalog: tuple[DependencyChoice, ...], console: Console) -> None:
    """Print the catalog as a numbered table with default markers."""
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 2))
    table.add_column("#", justify="right", style="bold")
    table.add_column("Package")
    table.add_column("Default", justify="center")
    for i, choice in enumerate(catalog, 1):
        name = choice.label if choice.label == choice.value else f"{choice.label} [dim]({choice.value})[/dim]"
        table.add_row(str(i), name, "[green]✓[/green]" if choice.default_selected else "")
    console.print(table)


class InteractivePrompter(BasePrompter):
    """Asks questions on the terminal, re-asking until each answer is valid."""

    def __init__(self, console: Console | None = None, toolchain_name: str = "Flutter") -> None:
        self._console = console or Console()
        self._toolchain_name = toolchain_name

    def confirm_install(self) -> bool:
        return typer.confirm(
            f"Would you like to install {self._toolchain_name} now?", default=True
        )

    def collect_answers(self, catalog: tuple[DependencyChoice, ...]) -> UserAnswers:
        project_name = self._ask_project_name()
        clean_architecture = typer.confirm(
            "Do you want to set up a Clean Architecture structure?", default=True
        )
        dependencies = self._ask_dependencies(catalog)
        return UserAnswers.for_catalog(
            catalog,
            project_name=project_name,
            clean_architecture=clean_architecture,
            dependencies=dependencies,
        )

    def _ask_project_name(self) -> str:
        while True:
            raw = typer.prompt("Enter your project name")
            try:
                return validate_project_name(raw)
            except InvalidProjectNameError as exc:
                self._console.print(f"[yellow]{exc}[/yellow]")

    def _ask_dependencies(self, catalog: tuple[DependencyChoice, ...]) -> list[str]:
        self._console.print("Select additional dependencies to install:")
        render_catalog(catalog, self._console)
        while True:
            raw = typer.prompt(
                "Numbers or names, comma-separated (blank = defaults, 'none' = skip)",
                default="",
                show_default=False,
            )
            try:
                return parse_selection(raw, catalog)
            except ValueError as exc:
                self._console.print(f"[yellow]{exc}[/yellow]")
