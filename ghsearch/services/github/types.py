"""Data types for GitHub API responses."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GitHubUser:
    """GitHub user as returned by the search endpoint."""

    id: int
    login: str
    avatar_url: str
    html_url: str
    # Only present on full profile payloads, absent from search results
    name: str | None = None
    bio: str | None = None
    public_repos: int | None = None
    followers: int | None = None
    following: int | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "GitHubUser":
        return cls(
            id=data["id"],
            login=data["login"],
            avatar_url=data.get("avatar_url", ""),
            html_url=data.get("html_url", ""),
            name=data.get("name"),
            bio=data.get("bio"),
            public_repos=data.get("public_repos"),
            followers=data.get("followers"),
            following=data.get("following"),
        )


@dataclass(frozen=True)
class GitHubRepo:
    """Public repository of a GitHub user."""

    id: int
    name: str
    full_name: str
    description: str | None
    html_url: str
    stargazers_count: int
    forks_count: int
    language: str | None
    updated_at: str  # ISO 8601 timestamp

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "GitHubRepo":
        return cls(
            id=data["id"],
            name=data["name"],
            full_name=data["full_name"],
            description=data.get("description"),
            html_url=data["html_url"],
            stargazers_count=data.get("stargazers_count", 0),
            forks_count=data.get("forks_count", 0),
            language=data.get("language"),
            updated_at=data.get("updated_at", ""),
        )


@dataclass
class UserSearchResult:
    """Response from searching users. Item order is GitHub's relevance order."""

    items: list[GitHubUser]
    total_count: int


@dataclass
class RepositoryPage:
    """One page of a user's repositories."""

    items: list[GitHubRepo]
    has_next_page: bool
