import typer

from stratus.core.config import ConfigStore
from stratus.core.runner import run_make_bucket

MB_EPILOG = """
Examples:

  1. Create a bucket on Amazon S3 object storage.
     $ stratus mb https://s3.amazonaws.com/public-document-store

  2. Make a directory on the local filesystem, including its parent directories.
     $ stratus mb ~/backups/2026

  3. Create a bucket through a configured alias.
     $ stratus mb play/mongodb-backup
"""


def make_bucket_command(
    ctx: typer.Context,
    targets: list[str] = typer.Argument(
        None, metavar="TARGET [TARGET...]", show_default=False
    ),
):
    """
    Make a bucket or folder.
    """
    if not targets or targets[0] == "help":
        typer.echo(ctx.get_help())
        raise typer.Exit(1)

    store = ctx.obj if isinstance(ctx.obj, ConfigStore) else ConfigStore()
    exit_code = run_make_bucket(targets, store)

    if exit_code != 0:
        raise typer.Exit(exit_code)
