"""
Proxy endpoints for GitHub user search and user repository listing.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Query
from pydantic import BaseModel, ConfigDict, Field

from ghsearch.api.deps import GitHubApiDep
from ghsearch.api.v1.errors import EndpointLogger, bad_request, error_response
from ghsearch.config import settings

router = APIRouter(prefix="/users", tags=["users"])

user_logger = EndpointLogger(logging.getLogger(__name__), "UserAPI")
repos_logger = EndpointLogger(logging.getLogger(__name__), "ReposAPI")

QUERY_REQUIRED_MESSAGE = 'Query parameter "q" is required'
USERNAME_REQUIRED_MESSAGE = "Username parameter is required"
INVALID_PAGE_MESSAGE = "Page parameter must be a positive integer"


# --- Response Models ---


class GitHubUserOut(BaseModel):
    """GitHub user as listed in search results."""

    id: int
    login: str
    avatar_url: str
    html_url: str
    name: str | None = None
    bio: str | None = None
    public_repos: int | None = None
    followers: int | None = None
    following: int | None = None


class UserSearchResponse(BaseModel):
    """Response for user search."""

    items: list[GitHubUserOut]
    total_count: int


class GitHubRepoOut(BaseModel):
    """Public repository of a user."""

    id: int
    name: str
    full_name: str
    description: str | None
    html_url: str
    stargazers_count: int
    forks_count: int
    language: str | None
    updated_at: str


class RepositoryPageResponse(BaseModel):
    """One page of a user's repositories."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[GitHubRepoOut]
    has_next_page: bool = Field(alias="hasNextPage")


def parse_page(raw: str | None) -> int | None:
    """Parse the optional `page` query parameter; None means it is invalid."""
    if raw is None or raw == "":
        return 1
    try:
        page = int(raw)
    except ValueError:
        return None
    return page if page >= 1 else None


# --- Endpoints ---


@router.get("", response_model=UserSearchResponse)
async def search_users(
    github: GitHubApiDep,
    q: str | None = Query(None, description="Username search text"),
):
    """Search GitHub users. Returns at most `search_results_limit` users."""
    if not q:
        return bad_request(QUERY_REQUIRED_MESSAGE)

    try:
        result = await github.search_users(q, settings.search_results_limit)
    except Exception as e:
        return error_response(e, user_logger, "Failed to fetch users from GitHub")

    return UserSearchResponse(
        items=[GitHubUserOut(**asdict(user)) for user in result.items],
        total_count=result.total_count,
    )


@router.get("/{username}/repos", response_model=RepositoryPageResponse)
async def get_user_repositories(
    username: str,
    github: GitHubApiDep,
    page: str | None = Query(None, description="Page number, starting at 1"),
):
    """List a user's public repositories, one page at a time."""
    if not username:
        return bad_request(USERNAME_REQUIRED_MESSAGE)

    page_number = parse_page(page)
    if page_number is None:
        return bad_request(INVALID_PAGE_MESSAGE)

    try:
        result = await github.get_user_repositories(
            username, page_number, settings.repos_per_page
        )
    except Exception as e:
        return error_response(e, repos_logger, "Failed to fetch repositories from GitHub")

    return RepositoryPageResponse(
        items=[GitHubRepoOut(**asdict(repo)) for repo in result.items],
        has_next_page=result.has_next_page,
    )
