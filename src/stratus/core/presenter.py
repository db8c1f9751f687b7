import logging
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stratus.core.errors import StratusError

console_out = Console()
console_err = Console(stderr=True)


@dataclass
class ErrorMessage:
    """A user-facing message paired with the error behind it."""

    message: str
    error: BaseException


def _cause_chain(error: BaseException) -> list[BaseException]:
    if isinstance(error, StratusError):
        return error.cause_chain()

    chain = []
    cause = error.__cause__
    while cause is not None:
        chain.append(cause)
        cause = cause.__cause__
    return chain


def _print_error_message(label: str, color: str, err_msg: ErrorMessage):
    console_err.print(
        f"[bold {color}]{label}:[/bold {color}] {escape(err_msg.message)}"
    )
    console_err.print(f"  Reason: {escape(str(err_msg.error))}", style=color)

    if not logging.getLogger().isEnabledFor(logging.DEBUG):
        return

    error = err_msg.error
    if isinstance(error, StratusError):
        for key, value in error.context.items():
            console_err.print(f"  {key}: {escape(value)}", style="dim")

    for cause in _cause_chain(error):
        console_err.print(
            f"  Caused by: {type(cause).__name__}: {escape(str(cause))}",
            style="dim",
        )


def print_fatal(err_msg: ErrorMessage):
    _print_error_message("Fatal", "red", err_msg)


def print_error(err_msg: ErrorMessage):
    _print_error_message("Error", "yellow", err_msg)


def print_success(message: str):
    console_out.print(f"[green]{escape(message)}[/green]")


class AliasPresenter:
    def __init__(self, aliases: dict[str, str]):
        self.aliases = aliases

    def print_table(self, title: str = "Aliases"):
        table = Table(title=title, show_lines=True)
        table.add_column("Alias")
        table.add_column("URL")

        for name, prefix in sorted(self.aliases.items()):
            table.add_row(escape(name), escape(prefix))

        console_out.print(table)
