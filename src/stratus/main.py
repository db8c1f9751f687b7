"""
Entry Point.
This is the root of the CLI command tree. It should not contain business logic.
It wires global options and aggregates the command modules into the main Typer app.
"""

from pathlib import Path

import typer

from stratus.cli import MB_EPILOG, config_app, make_bucket_command
from stratus.core.config import ConfigStore
from stratus.core.runner import setup_logging

app = typer.Typer(help="Stratus: object storage client")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    config_dir: Path = typer.Option(
        None,
        "--config-dir",
        help="Directory holding config.json (default: ~/.stratus)",
    ),
):
    setup_logging(verbose)
    ctx.obj = ConfigStore(config_dir)


app.command("mb", epilog=MB_EPILOG)(make_bucket_command)
app.add_typer(config_app, name="config")

if __name__ == "__main__":
    app()
