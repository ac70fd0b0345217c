"""flutter-quickstart CLI entry point."""

import typer

from flutter_quickstart import __version__
from flutter_quickstart.cli.check_cmd import check_flutter
from flutter_quickstart.cli.run_cmd import run

app = typer.Typer(
    name="flutter-quickstart",
    help="Scaffold Flutter projects with a clean architecture layout",
    no_args_is_help=True,
)

# Register subcommands
app.command()(run)
app.command(name="check-flutter")(check_flutter)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"flutter-quickstart {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Scaffold Flutter projects with a clean architecture layout."""
