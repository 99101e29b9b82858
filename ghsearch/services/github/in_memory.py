"""
Fixture-backed GitHub API for demos and end-to-end runs.

Enabled with USE_IN_MEMORY_GITHUB=true. Behaves like GitHubClient for
validation and pagination but never touches the network.
"""

import asyncio

from ghsearch.services.github.constants import DEFAULT_REPOS_PER_PAGE, DEFAULT_SEARCH_LIMIT
from ghsearch.services.github.exceptions import GitHubAPIError
from ghsearch.services.github.types import (
    GitHubRepo,
    GitHubUser,
    RepositoryPage,
    UserSearchResult,
)

FIXTURE_USERS: dict[str, GitHubUser] = {
    "octocat": GitHubUser(
        id=1,
        login="octocat",
        avatar_url="https://avatars.githubusercontent.com/u/583231",
        html_url="https://github.com/octocat",
        public_repos=8,
    ),
    "torvalds": GitHubUser(
        id=2,
        login="torvalds",
        avatar_url="https://avatars.githubusercontent.com/u/1024025",
        html_url="https://github.com/torvalds",
        public_repos=100,
    ),
    "testuser": GitHubUser(
        id=3,
        login="testuser",
        avatar_url="https://avatars.githubusercontent.com/u/123456",
        html_url="https://github.com/testuser",
        public_repos=0,
    ),
}


def _repo(
    repo_id: int,
    owner: str,
    name: str,
    description: str | None,
    stars: int,
    forks: int,
    language: str | None,
    updated_at: str,
) -> GitHubRepo:
    return GitHubRepo(
        id=repo_id,
        name=name,
        full_name=f"{owner}/{name}",
        description=description,
        html_url=f"https://github.com/{owner}/{name}",
        stargazers_count=stars,
        forks_count=forks,
        language=language,
        updated_at=updated_at,
    )


_OCTOCAT_REPOS = [
    _repo(1, "octocat", "Hello-World", "My first repository on GitHub!", 2000, 500, "TypeScript", "2024-01-15T10:30:00Z"),
    _repo(2, "octocat", "Spoon-Knife", "This repo is for demonstration purposes only.", 12000, 8000, "HTML", "2024-01-10T08:20:00Z"),
    _repo(3, "octocat", "octocat.github.io", "Personal website", 150, 30, "JavaScript", "2023-12-20T14:45:00Z"),
    _repo(4, "octocat", "test-repo", "Test repository", 50, 10, "Python", "2023-11-05T09:15:00Z"),
    _repo(5, "octocat", "another-repo", "Another test repository", 25, 5, "Go", "2023-10-12T16:30:00Z"),
    _repo(6, "octocat", "sample-project", "Sample project for testing", 10, 2, "Rust", "2023-09-18T11:00:00Z"),
    _repo(7, "octocat", "demo-app", "Demo application", 5, 1, "Java", "2023-08-22T13:45:00Z"),
    _repo(8, "octocat", "learning-git", "Learning git basics", 3, 0, None, "2023-07-30T10:20:00Z"),
]

_TORVALDS_LANGUAGES = ["C", "C++", "Rust", "Python", None]

# Enough repositories to span several pages
_TORVALDS_REPOS = [
    _repo(
        100 + i,
        "torvalds",
        f"repo-{i + 1}",
        f"Repository {i + 1} description",
        (i * 97) % 10000,
        (i * 13) % 1000,
        _TORVALDS_LANGUAGES[i % len(_TORVALDS_LANGUAGES)],
        f"2024-{(i % 12) + 1:02d}-{(i % 28) + 1:02d}T12:00:00Z",
    )
    for i in range(100)
]

FIXTURE_REPOSITORIES: dict[str, list[GitHubRepo]] = {
    "octocat": _OCTOCAT_REPOS,
    "torvalds": _TORVALDS_REPOS,
    "testuser": [],
}


class InMemoryGitHubClient:
    """GitHubApi implementation serving fixture users and repositories."""

    def __init__(
        self,
        users: dict[str, GitHubUser] | None = None,
        repositories: dict[str, list[GitHubRepo]] | None = None,
        delay: float = 0.0,
    ):
        self.users = FIXTURE_USERS if users is None else users
        self.repositories = FIXTURE_REPOSITORIES if repositories is None else repositories
        self.delay = delay

    async def search_users(
        self, query: str, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> UserSearchResult:
        if not query.strip():
            raise GitHubAPIError.empty_query()
        await asyncio.sleep(self.delay)

        needle = query.strip().lower()
        matches = [u for u in self.users.values() if needle in u.login.lower()]
        return UserSearchResult(items=matches[:limit], total_count=len(matches))

    async def get_user_repositories(
        self,
        username: str,
        page: int = 1,
        per_page: int = DEFAULT_REPOS_PER_PAGE,
    ) -> RepositoryPage:
        if not username.strip():
            raise GitHubAPIError.empty_username()
        await asyncio.sleep(self.delay)

        if username not in self.repositories:
            raise GitHubAPIError.user_not_found()

        repos = self.repositories[username]
        start = (page - 1) * per_page
        end = start + per_page
        return RepositoryPage(items=repos[start:end], has_next_page=end < len(repos))
