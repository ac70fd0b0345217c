"""Allow running as ``python -m flutter_quickstart``."""

from flutter_quickstart.cli.main import app

app()
