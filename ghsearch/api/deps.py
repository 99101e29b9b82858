"""API dependencies."""

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends

from ghsearch.config import settings
from ghsearch.services.github import (
    GitHubApi,
    GitHubClient,
    InMemoryGitHubClient,
    create_github_http_client,
)


async def get_github_api() -> AsyncIterator[GitHubApi]:
    """
    Provide a GitHub API client scoped to the current request.

    Yields the fixture-backed client when USE_IN_MEMORY_GITHUB is set,
    otherwise a GitHubClient over a fresh HTTP client that is closed once
    the response has been produced.
    """
    if settings.use_in_memory_github:
        yield InMemoryGitHubClient()
        return

    async with create_github_http_client() as http:
        yield GitHubClient(
            http,
            base_url=settings.github_api_url,
            user_agent=settings.github_user_agent,
        )


GitHubApiDep = Annotated[GitHubApi, Depends(get_github_api)]
