"""CLI interface for GitHub User Stats."""

import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from shared.cli import error, handle_errors, success
from shared.logger import setup_logger

from . import __version__
from .fetcher import GitHubUserError, GitHubUserFetcher
from .renderer import render_profile, render_repositories

console = Console()

BANNER = "GitHub Stats"

# Top-level packages whose loggers follow --verbose
LOGGER_NAMES = ("tools", "shared")


def show_banner() -> None:
    console.print(
        Panel(f"[bold yellow]{BANNER}[/bold yellow]", border_style="yellow", expand=False, padding=(1, 4))
    )


def validate_username(ctx, param, value: str) -> str:
    if not value:
        raise click.BadParameter("username must not be empty")
    return value


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="gh-user-stats", message="%(version)s")
@click.argument("username", callback=validate_username)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(username: str, verbose: bool):
    """
    A CLI tool to view GitHub user statistics.

    Shows the profile of USERNAME and its five most recently updated
    repositories.

    Examples:

        \b
        gh-user-stats octocat
    """
    log_level = "DEBUG" if verbose else "WARNING"
    for name in LOGGER_NAMES:
        setup_logger(name, level=log_level)

    show_banner()

    fetcher = GitHubUserFetcher()

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Fetching GitHub data...", total=None)
            profile = fetcher.fetch_profile(username)
            repos = fetcher.fetch_repositories(username)
    except GitHubUserError as e:
        error(str(e))
        sys.exit(1)

    success("Data fetched successfully!")

    render_profile(profile)
    render_repositories(repos)


if __name__ == "__main__":
    main()
