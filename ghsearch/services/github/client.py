"""
GitHub API client for user search and repository listing.

The client is stateless apart from the httpx.AsyncClient it is handed, so a
fresh instance is built for every proxy request.
"""

import logging
from typing import Protocol
from urllib.parse import quote

import httpx

from ghsearch.services.github.constants import (
    DEFAULT_REPOS_PER_PAGE,
    DEFAULT_SEARCH_LIMIT,
    GITHUB_API_BASE_URL,
    GITHUB_API_HEADERS,
)
from ghsearch.services.github.exceptions import GitHubAPIError
from ghsearch.services.github.helpers import (
    RateLimitInfo,
    has_next_page,
    raise_for_repos_status,
    raise_for_search_status,
)
from ghsearch.services.github.types import (
    GitHubRepo,
    GitHubUser,
    RepositoryPage,
    UserSearchResult,
)

logger = logging.getLogger(__name__)


class GitHubApi(Protocol):
    """Operations the proxy endpoints need from GitHub."""

    async def search_users(
        self, query: str, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> UserSearchResult: ...

    async def get_user_repositories(
        self,
        username: str,
        page: int = 1,
        per_page: int = DEFAULT_REPOS_PER_PAGE,
    ) -> RepositoryPage: ...


class GitHubClient:
    """
    Read-only client for GitHub's public REST API.

    Input is validated before any request is made, and every non-2xx
    response is translated into a GitHubAPIError.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        base_url: str = GITHUB_API_BASE_URL,
        user_agent: str | None = None,
    ):
        self._http = http
        self.base_url = base_url.rstrip("/")
        self._headers = dict(GITHUB_API_HEADERS)
        if user_agent:
            self._headers["User-Agent"] = user_agent

    async def search_users(
        self, query: str, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> UserSearchResult:
        """
        Search GitHub users by login.

        Args:
            query: Search text, sent as-is (httpx URL-encodes it)
            limit: Maximum number of users to return (per_page)

        Returns:
            UserSearchResult with users in GitHub's relevance order

        Raises:
            GitHubAPIError: EMPTY_QUERY for blank input, otherwise the kind
                matching the upstream status
        """
        if not query.strip():
            raise GitHubAPIError.empty_query()

        response = await self._http.get(
            f"{self.base_url}/search/users",
            headers=self._headers,
            params={"q": query, "per_page": limit},
        )
        raise_for_search_status(response)

        data = response.json()
        return UserSearchResult(
            items=[GitHubUser.from_api(item) for item in data.get("items", [])],
            total_count=data.get("total_count", 0),
        )

    async def get_user_repositories(
        self,
        username: str,
        page: int = 1,
        per_page: int = DEFAULT_REPOS_PER_PAGE,
    ) -> RepositoryPage:
        """
        Fetch one page of a user's public repositories, sorted by full name.

        Args:
            username: GitHub login
            page: Page number (1-indexed)
            per_page: Items per page

        Returns:
            RepositoryPage; has_next_page follows the Link header

        Raises:
            GitHubAPIError: EMPTY_USERNAME for blank input, otherwise the kind
                matching the upstream status
        """
        if not username.strip():
            raise GitHubAPIError.empty_username()

        response = await self._http.get(
            f"{self.base_url}/users/{quote(username, safe='')}/repos",
            headers=self._headers,
            params={"sort": "full_name", "page": page, "per_page": per_page},
        )
        raise_for_repos_status(response)

        rate_info = RateLimitInfo(response)
        if rate_info.remaining is not None:
            logger.debug(f"GitHub rate limit remaining: {rate_info.remaining}")

        return RepositoryPage(
            items=[GitHubRepo.from_api(r) for r in response.json()],
            has_next_page=has_next_page(response),
        )
