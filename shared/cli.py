"""Console helpers shared by the command-line tools."""

import functools
import sys
from typing import Any, Callable, Optional

import click
from rich.console import Console
from rich.table import Table

from .logger import get_logger

console = Console()
logger = get_logger(__name__)


def info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {message}")


def success(message: str) -> None:
    console.print(f"[bold green]✓[/bold green] {message}")


def warning(message: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    console.print(f"[bold red]✗[/bold red] {message}")


def create_table(title: Optional[str] = None, **kwargs: Any) -> Table:
    """
    Create a table with the common tool styling.

    Args:
        title: Optional table title
        **kwargs: Extra arguments passed to rich.table.Table

    Returns:
        Empty Table ready for columns
    """
    kwargs.setdefault("header_style", "bold white")
    kwargs.setdefault("show_lines", False)
    return Table(title=title, **kwargs)


def print_table(table: Table, target: Optional[Console] = None) -> None:
    """Print a table to the given console (defaults to the shared one)."""
    (target or console).print(table)


def handle_errors(func: Callable) -> Callable:
    """
    Turn uncaught exceptions of a click command into a message and exit code.

    click's own exceptions (usage errors, --help, --version) and SystemExit
    pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (click.exceptions.ClickException, click.exceptions.Exit, click.exceptions.Abort):
            raise
        except KeyboardInterrupt:
            warning("Interrupted by user")
            sys.exit(130)
        except Exception as e:
            logger.debug("Unhandled error", exc_info=True)
            error(f"Unexpected error: {e}")
            sys.exit(1)

    return wrapper
