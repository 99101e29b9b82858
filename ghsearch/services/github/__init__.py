"""
GitHub service package.

Usage: `from ghsearch.services.github import GitHubClient, GitHubAPIError`

Module structure:
- client.py: GitHubClient and the GitHubApi protocol
- in_memory.py: fixture-backed GitHubApi for demos and tests
- helpers.py: status-code mapping, pagination and rate limit headers
- http_client.py: per-request httpx client factory
- types.py: Data types and response models
- exceptions.py: GitHubAPIError and its closed set of kinds
- constants.py: API constants and failure messages
"""

from ghsearch.services.github.client import GitHubApi, GitHubClient
from ghsearch.services.github.exceptions import GitHubAPIError, GitHubErrorKind
from ghsearch.services.github.helpers import RateLimitInfo, has_next_page
from ghsearch.services.github.http_client import create_github_http_client
from ghsearch.services.github.in_memory import InMemoryGitHubClient
from ghsearch.services.github.types import (
    GitHubRepo,
    GitHubUser,
    RepositoryPage,
    UserSearchResult,
)

__all__ = [
    # Clients
    "GitHubApi",
    "GitHubClient",
    "InMemoryGitHubClient",
    # HTTP client lifecycle
    "create_github_http_client",
    # Utilities
    "has_next_page",
    "RateLimitInfo",
    # Exceptions
    "GitHubAPIError",
    "GitHubErrorKind",
    # Types
    "GitHubRepo",
    "GitHubUser",
    "RepositoryPage",
    "UserSearchResult",
]
