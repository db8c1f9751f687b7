import typer
from rich.markup import escape

from stratus.core.config import ConfigStore, default_config
from stratus.core.errors import (
    ConfigurationMissingError,
    ConfigurationReadError,
    ConfigurationWriteError,
)
from stratus.core.presenter import (
    AliasPresenter,
    ErrorMessage,
    console_err,
    print_fatal,
)
from stratus.core.runner import describe_fatal, load_config

app = typer.Typer(help="Manage the stratus configuration file")


def _get_store(ctx: typer.Context) -> ConfigStore:
    return ctx.obj if isinstance(ctx.obj, ConfigStore) else ConfigStore()


@app.command("generate")
def generate(
    ctx: typer.Context,
    force: bool = typer.Option(
        False, "--force", help="Overwrite an existing config file"
    ),
):
    """Generate a default configuration file."""
    store = _get_store(ctx)
    config_path = str(store.path())

    if store.exists() and not force:
        error = ConfigurationWriteError(
            "config file already exists, use --force to overwrite", path=config_path
        )
        print_fatal(
            ErrorMessage(f"Unable to generate config file ‘{config_path}’", error)
        )
        raise typer.Exit(1)

    try:
        written = store.save(default_config())
    except ConfigurationWriteError as e:
        print_fatal(ErrorMessage(f"Unable to write config file ‘{config_path}’", e))
        raise typer.Exit(1) from e

    console_err.print(
        f"[bold green]Configuration written to[/bold green] {escape(str(written))}"
    )


@app.command("aliases")
def aliases(ctx: typer.Context):
    """List configured aliases."""
    store = _get_store(ctx)

    try:
        config = load_config(store)
    except (ConfigurationMissingError, ConfigurationReadError) as e:
        print_fatal(ErrorMessage(describe_fatal(e, str(store.path())), e))
        raise typer.Exit(1) from e

    if config.aliases:
        AliasPresenter(config.aliases).print_table()
    else:
        console_err.print("[bold blue]No Aliases Configured[/bold blue]")
