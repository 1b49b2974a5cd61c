"""Console helpers shared by CLI commands."""

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from scaffoldr_common import ScaffoldrError, UnsupportedOptionError

console = Console()


def success(message: str) -> None:
    console.print(f"[bold green]✔[/bold green] {escape(message)}")


def error(message: str) -> None:
    console.print(f"[bold red]✖[/bold red] {escape(message)}")


def warning(message: str) -> None:
    console.print(f"[bold yellow]![/bold yellow] {escape(message)}")


def info(message: str) -> None:
    console.print(f"[bold cyan]i[/bold cyan] {escape(message)}")


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask a yes/no question on the console."""
    return Confirm.ask(message, default=default, console=console)


def handle_error(exc: ScaffoldrError) -> NoReturn:
    """Report a scaffoldr error and exit with status 1."""
    if isinstance(exc, UnsupportedOptionError):
        error(f"Invalid option '{exc.option}': {exc.message}")
    else:
        error(exc.message)
    raise typer.Exit(1)
