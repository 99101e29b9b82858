"""API endpoint tests for the GitHub proxy routes.

Tests the HTTP layer: parameter validation, response shapes, error codes,
and the failure log line, with the GitHub client mocked out.
"""

from __future__ import annotations

import json
import logging

import pytest
from httpx import AsyncClient

from ghsearch.api.v1 import users as users_api
from ghsearch.services.github.exceptions import GitHubAPIError
from ghsearch.services.github.types import (
    GitHubRepo,
    GitHubUser,
    RepositoryPage,
    UserSearchResult,
)

LOGGER = "ghsearch.api.v1.users"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _github_user(user_id: int = 1, login: str = "octocat") -> GitHubUser:
    return GitHubUser(
        id=user_id,
        login=login,
        avatar_url=f"https://avatars.githubusercontent.com/u/{user_id}",
        html_url=f"https://github.com/{login}",
    )


def _github_repo(repo_id: int = 1001, name: str = "test-repo") -> GitHubRepo:
    return GitHubRepo(
        id=repo_id,
        name=name,
        full_name=f"octocat/{name}",
        description="A test repo",
        html_url=f"https://github.com/octocat/{name}",
        stargazers_count=10,
        forks_count=2,
        language="Python",
        updated_at="2026-01-15T00:00:00Z",
    )


def _error_messages(caplog) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == LOGGER and r.levelno >= logging.ERROR]


# ═══════════════════════════════════════════════════════════════════════════
# GET /api/users — Search users
# ═══════════════════════════════════════════════════════════════════════════


class TestSearchUsers:
    """Tests for the user search endpoint."""

    @pytest.mark.anyio
    async def test_returns_search_result(self, api_client: AsyncClient, github_api):
        github_api.search_users.return_value = UserSearchResult(
            items=[_github_user()], total_count=1
        )

        resp = await api_client.get("/api/users", params={"q": "octocat"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["total_count"] == 1
        assert data["items"][0]["login"] == "octocat"
        assert data["items"][0]["html_url"] == "https://github.com/octocat"
        github_api.search_users.assert_awaited_once_with("octocat", 5)

    @pytest.mark.anyio
    async def test_uses_configured_limit(self, api_client: AsyncClient, github_api, monkeypatch):
        from ghsearch.config.settings import settings

        monkeypatch.setattr(settings, "search_results_limit", 12)
        github_api.search_users.return_value = UserSearchResult(items=[], total_count=0)

        await api_client.get("/api/users", params={"q": "octocat"})

        github_api.search_users.assert_awaited_once_with("octocat", 12)

    @pytest.mark.anyio
    @pytest.mark.parametrize("path", ["/api/users", "/api/users?q="])
    async def test_missing_query_is_400_without_upstream_call(
        self, api_client: AsyncClient, github_api, caplog, path
    ):
        caplog.set_level(logging.ERROR)

        resp = await api_client.get(path)

        assert resp.status_code == 400
        assert resp.json() == {"error": 'Query parameter "q" is required'}
        github_api.search_users.assert_not_called()
        assert _error_messages(caplog) == []

    @pytest.mark.anyio
    async def test_blank_query_is_400(self, api_client: AsyncClient, github_api):
        github_api.search_users.side_effect = GitHubAPIError.empty_query()

        resp = await api_client.get("/api/users", params={"q": "   "})

        assert resp.status_code == 400
        assert resp.json() == {"error": "Search query cannot be empty"}

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        ("error", "status_code", "message"),
        [
            (
                GitHubAPIError.rate_limited(),
                403,
                "GitHub API rate limit exceeded. Please try again later.",
            ),
            (GitHubAPIError.invalid_query(), 422, "Invalid search query"),
            (GitHubAPIError.upstream(502), 502, "GitHub API error: 502"),
            (RuntimeError("socket closed"), 500, "socket closed"),
            (RuntimeError(), 500, "Failed to fetch users from GitHub"),
        ],
    )
    async def test_failures_are_mapped_and_logged(
        self, api_client: AsyncClient, github_api, caplog, error, status_code, message
    ):
        caplog.set_level(logging.ERROR)
        github_api.search_users.side_effect = error

        resp = await api_client.get("/api/users", params={"q": "octocat"})

        assert resp.status_code == status_code
        assert resp.json() == {"error": message}
        assert _error_messages(caplog) == [f"[UserAPI] {message} (status: {status_code})"]


# ═══════════════════════════════════════════════════════════════════════════
# GET /api/users/{username}/repos — List repositories
# ═══════════════════════════════════════════════════════════════════════════


class TestGetUserRepositories:
    """Tests for the user repositories endpoint."""

    @pytest.mark.anyio
    async def test_returns_first_page(self, api_client: AsyncClient, github_api):
        github_api.get_user_repositories.return_value = RepositoryPage(
            items=[_github_repo()], has_next_page=True
        )

        resp = await api_client.get("/api/users/octocat/repos")

        assert resp.status_code == 200
        data = resp.json()
        assert data["hasNextPage"] is True
        assert data["items"][0]["full_name"] == "octocat/test-repo"
        assert data["items"][0]["stargazers_count"] == 10
        github_api.get_user_repositories.assert_awaited_once_with("octocat", 1, 30)

    @pytest.mark.anyio
    async def test_forwards_page(self, api_client: AsyncClient, github_api):
        github_api.get_user_repositories.return_value = RepositoryPage(items=[], has_next_page=False)

        resp = await api_client.get("/api/users/octocat/repos", params={"page": "3"})

        assert resp.status_code == 200
        assert resp.json() == {"items": [], "hasNextPage": False}
        github_api.get_user_repositories.assert_awaited_once_with("octocat", 3, 30)

    @pytest.mark.anyio
    @pytest.mark.parametrize("page", ["abc", "0", "-2", "1.5", "2abc"])
    async def test_invalid_page_is_400(self, api_client: AsyncClient, github_api, page):
        resp = await api_client.get("/api/users/octocat/repos", params={"page": page})

        assert resp.status_code == 400
        assert resp.json() == {"error": "Page parameter must be a positive integer"}
        github_api.get_user_repositories.assert_not_called()

    @pytest.mark.anyio
    async def test_blank_username_is_400(self, api_client: AsyncClient, github_api):
        github_api.get_user_repositories.side_effect = GitHubAPIError.empty_username()

        resp = await api_client.get("/api/users/%20%20%20/repos")

        assert resp.status_code == 400
        assert resp.json() == {"error": "Username cannot be empty"}

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        ("error", "status_code", "message"),
        [
            (
                GitHubAPIError.rate_limited(),
                403,
                "GitHub API rate limit exceeded. Please try again later.",
            ),
            (GitHubAPIError.user_not_found(), 404, "User not found"),
            (GitHubAPIError.upstream(500), 500, "GitHub API error: 500"),
            (ValueError(), 500, "Failed to fetch repositories from GitHub"),
        ],
    )
    async def test_failures_are_mapped_and_logged(
        self, api_client: AsyncClient, github_api, caplog, error, status_code, message
    ):
        caplog.set_level(logging.ERROR)
        github_api.get_user_repositories.side_effect = error

        resp = await api_client.get("/api/users/octocat/repos")

        assert resp.status_code == status_code
        assert resp.json() == {"error": message}
        assert _error_messages(caplog) == [f"[ReposAPI] {message} (status: {status_code})"]

    @pytest.mark.anyio
    async def test_empty_username_is_400_without_upstream_call(self, github_api, caplog):
        """The router never matches an empty segment, so call the handler directly."""
        caplog.set_level(logging.ERROR)

        resp = await users_api.get_user_repositories(username="", github=github_api, page=None)

        assert resp.status_code == 400
        assert json.loads(resp.body) == {"error": "Username parameter is required"}
        github_api.get_user_repositories.assert_not_called()
        assert _error_messages(caplog) == []


class TestParsePage:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(None, 1), ("", 1), ("1", 1), ("7", 7), ("0", None), ("x", None)],
    )
    def test_parse(self, raw, expected):
        assert users_api.parse_page(raw) == expected


class TestHealth:
    @pytest.mark.anyio
    async def test_health(self, api_client: AsyncClient):
        resp = await api_client.get("/health")

        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy"}
