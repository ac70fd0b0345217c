"""Shared wiring for CLI commands: config loading and executor construction."""

from __future__ import annotations

from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console

from flutter_quickstart.models.config import ToolConfig, load_tool_config
from flutter_quickstart.shell.base import BaseExecutor
from flutter_quickstart.shell.subprocess_executor import SubprocessExecutor


def load_config_or_exit(config_path: str | None) -> ToolConfig:
    """Load the tool config, exiting with code 1 on any config problem."""
    path = Path(config_path) if config_path else None
    try:
        return load_tool_config(path)
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except yaml.YAMLError as e:
        typer.echo(f"Error: Invalid YAML in config file: {e}", err=True)
        raise typer.Exit(code=1)
    except ValidationError as e:
        typer.echo(f"Error: Invalid config file:\n{e}", err=True)
        raise typer.Exit(code=1)


def build_executor(console: Console) -> BaseExecutor:
    """Return the executor used for real runs."""
    return SubprocessExecutor(console=console)
