"""Terminal rendering of a user's profile and repositories."""

from datetime import datetime
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shared.cli import create_table, print_table

from .fetcher import REPOS_PER_PAGE, Profile, RepositorySummary

default_console = Console()

DESCRIPTION_LIMIT = 27
ELLIPSIS = "..."
MISSING = "N/A"

# (header, content width, justify); borders and padding add 16, total stays under 80
REPO_COLUMNS = [
    ("Repository", 13, "left"),
    ("Description", DESCRIPTION_LIMIT + len(ELLIPSIS), "left"),
    ("Stars", 6, "right"),
    ("Forks", 6, "right"),
    ("Language", 8, "left"),
]


def truncate_description(description: Optional[str]) -> str:
    """Cut a description to DESCRIPTION_LIMIT characters, marking the cut."""
    if not description:
        return ""
    if len(description) > DESCRIPTION_LIMIT:
        return description[:DESCRIPTION_LIMIT] + ELLIPSIS
    return description


def format_language(language: Optional[str]) -> str:
    return language or MISSING


def format_created_date(created_at: Optional[str]) -> str:
    """
    Format an API timestamp as a local calendar date.

    Args:
        created_at: ISO-8601 timestamp such as "2011-01-25T18:44:36Z"

    Returns:
        Date as YYYY-MM-DD in the local timezone, N/A when missing, or the
        raw value when it is not a valid timestamp
    """
    if not created_at:
        return MISSING
    try:
        created = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    except ValueError:
        return created_at
    return created.astimezone().strftime("%Y-%m-%d")


def render_profile(profile: Profile, console: Optional[Console] = None) -> None:
    """Print the profile block followed by the stats block."""
    out = console or default_console

    out.print("\n[bold]User Information:[/bold]")

    lines = [("Username", profile.login)]
    if profile.name:
        lines.append(("Name", profile.name))
    if profile.bio:
        lines.append(("Bio", profile.bio))
    lines.append(("Profile URL", profile.html_url))
    lines.append(("Account Created", format_created_date(profile.created_at)))

    for label, value in lines:
        out.print(f"{label}: {value}", style="blue", markup=False, highlight=False)

    out.print("\n[bold]Stats:[/bold]")
    stats = [
        ("Public Repositories", profile.public_repos),
        ("Followers", profile.followers),
        ("Following", profile.following),
    ]
    for label, value in stats:
        out.print(f"{label}: {value}", style="green", markup=False, highlight=False)


def build_repository_table(repos: Sequence[RepositorySummary]) -> Table:
    """
    Build the repository table, one row per repository.

    Args:
        repos: Repositories in display order

    Returns:
        Table with Repository, Description, Stars, Forks and Language columns
    """
    table = create_table(title=None, show_lines=True)

    for header, width, justify in REPO_COLUMNS:
        table.add_column(header, width=width, justify=justify, no_wrap=True, overflow="ellipsis")

    for repo in repos:
        table.add_row(
            f"[cyan]{escape(repo.name)}[/cyan]",
            escape(truncate_description(repo.description)),
            str(repo.stargazers_count),
            str(repo.forks_count),
            escape(format_language(repo.language)),
        )

    return table


def render_repositories(repos: Sequence[RepositorySummary], console: Optional[Console] = None) -> None:
    """Print the repository table, or a notice when there is nothing to show."""
    out = console or default_console

    if not repos:
        out.print("\n[yellow]No repositories found.[/yellow]")
        return

    out.print(f"\n[bold]Top {REPOS_PER_PAGE} Repositories:[/bold]")
    print_table(build_repository_table(repos), target=out)
