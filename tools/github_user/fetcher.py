"""Fetch a GitHub user's profile and recent repositories."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from shared.logger import get_logger

logger = get_logger(__name__)

API_BASE_URL = "https://api.github.com"
REQUEST_TIMEOUT = 10.0
REPOS_PER_PAGE = 5
USER_AGENT = "gh-user-stats"


class GitHubUserError(Exception):
    """Base error for user lookups."""


class UserNotFoundError(GitHubUserError):
    """The requested user does not exist."""


class FetchError(GitHubUserError):
    """Request, HTTP status or decoding failure."""


@dataclass(frozen=True)
class Profile:
    """Account-level information for a GitHub user."""

    login: str
    name: Optional[str]
    bio: Optional[str]
    avatar_url: str
    public_repos: int
    followers: int
    following: int
    created_at: Optional[str]
    html_url: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Profile":
        """Build a Profile from a /users/{username} payload."""
        return cls(
            login=data["login"],
            name=data.get("name"),
            bio=data.get("bio"),
            avatar_url=data.get("avatar_url") or "",
            public_repos=data.get("public_repos") or 0,
            followers=data.get("followers") or 0,
            following=data.get("following") or 0,
            created_at=data.get("created_at"),
            html_url=data.get("html_url") or "",
        )


@dataclass(frozen=True)
class RepositorySummary:
    """Condensed view of a single repository."""

    name: str
    description: Optional[str]
    html_url: str
    stargazers_count: int
    forks_count: int
    language: Optional[str]

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "RepositorySummary":
        """Build a RepositorySummary from one item of a /repos payload."""
        return cls(
            name=data["name"],
            description=data.get("description"),
            html_url=data.get("html_url") or "",
            stargazers_count=data.get("stargazers_count") or 0,
            forks_count=data.get("forks_count") or 0,
            language=data.get("language"),
        )


class GitHubUserFetcher:
    """
    Fetch user data from the GitHub REST API (v3).

    Requests are unauthenticated and never retried.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            base_url: API root URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to fake the API in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        }

    def fetch_profile(self, username: str) -> Profile:
        """
        Fetch the profile of a user.

        Args:
            username: GitHub login

        Returns:
            Profile

        Raises:
            UserNotFoundError: The API answered 404
            FetchError: Any other network, HTTP or decoding failure
        """
        failure = "Failed to fetch user data from GitHub API"
        logger.info(f"Fetching profile for {username}")

        response = self._get(self._user_path(username), failure)

        if response.status_code == 404:
            logger.info(f"User not found: {username}")
            raise UserNotFoundError(f"User '{username}' not found on GitHub")
        if response.status_code != 200:
            logger.error(f"Profile request failed: {response.status_code}")
            raise FetchError(failure)

        try:
            return Profile.from_api(response.json())
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Invalid profile payload: {e}")
            raise FetchError(failure) from e

    def fetch_repositories(self, username: str) -> List[RepositorySummary]:
        """
        Fetch the most recently updated repositories of a user.

        An unknown user usually comes back as an empty list rather than an
        error on this endpoint.

        Args:
            username: GitHub login

        Returns:
            Up to REPOS_PER_PAGE RepositorySummary, most recently updated first

        Raises:
            FetchError: Any network, HTTP or decoding failure
        """
        failure = "Failed to fetch repository data from GitHub API"
        logger.info(f"Fetching repositories for {username}")

        params = {"sort": "updated", "per_page": REPOS_PER_PAGE}
        response = self._get(f"{self._user_path(username)}/repos", failure, params=params)

        if response.status_code != 200:
            logger.error(f"Repository request failed: {response.status_code}")
            raise FetchError(failure)

        try:
            data = response.json()
            if not isinstance(data, list):
                raise TypeError(f"expected a list, got {type(data).__name__}")
            return [RepositorySummary.from_api(item) for item in data]
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Invalid repository payload: {e}")
            raise FetchError(failure) from e

    def _user_path(self, username: str) -> str:
        if not username:
            raise ValueError("Username must not be empty")
        return f"/users/{quote(username, safe='')}"

    def _get(
        self,
        path: str,
        failure: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """GET a path below base_url, mapping transport errors to FetchError."""
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} params={params}")

        try:
            with httpx.Client(
                headers=self.headers,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.error(f"Network error: {e}")
            raise FetchError(failure) from e

        logger.debug(f"{response.status_code} {url}")
        return response
