"""GitHub User Stats - Show a GitHub user's profile and recent repositories."""

from .fetcher import (
    FetchError,
    GitHubUserError,
    GitHubUserFetcher,
    Profile,
    RepositorySummary,
    UserNotFoundError,
)
from .renderer import render_profile, render_repositories

__version__ = "1.0.0"

__all__ = [
    "FetchError",
    "GitHubUserError",
    "GitHubUserFetcher",
    "Profile",
    "RepositorySummary",
    "UserNotFoundError",
    "render_profile",
    "render_repositories",
]
