"""Exceptions for GitHub service."""

from enum import Enum

from ghsearch.services.github.constants import (
    EMPTY_QUERY_MESSAGE,
    EMPTY_USERNAME_MESSAGE,
    INVALID_QUERY_MESSAGE,
    RATE_LIMITED_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
)


class GitHubErrorKind(str, Enum):
    """Closed set of failures the GitHub service can produce."""

    EMPTY_QUERY = "empty_query"
    EMPTY_USERNAME = "empty_username"
    RATE_LIMITED = "rate_limited"
    INVALID_QUERY = "invalid_query"
    USER_NOT_FOUND = "user_not_found"
    UPSTREAM = "upstream"


class GitHubAPIError(Exception):
    """Error from GitHub API, or input rejected before reaching it.

    `kind` tells callers which failure occurred; `status_code` is the HTTP
    status the failure maps to (400 for rejected input, otherwise the
    upstream status).
    """

    def __init__(
        self,
        kind: GitHubErrorKind,
        message: str,
        status_code: int,
        rate_limit_reset: int | None = None,
    ):
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)

    def __repr__(self) -> str:
        return f"GitHubAPIError(kind={self.kind.value!r}, status_code={self.status_code})"

    @classmethod
    def empty_query(cls) -> "GitHubAPIError":
        return cls(GitHubErrorKind.EMPTY_QUERY, EMPTY_QUERY_MESSAGE, 400)

    @classmethod
    def empty_username(cls) -> "GitHubAPIError":
        return cls(GitHubErrorKind.EMPTY_USERNAME, EMPTY_USERNAME_MESSAGE, 400)

    @classmethod
    def rate_limited(cls, reset: int | None = None) -> "GitHubAPIError":
        return cls(GitHubErrorKind.RATE_LIMITED, RATE_LIMITED_MESSAGE, 403, rate_limit_reset=reset)

    @classmethod
    def invalid_query(cls) -> "GitHubAPIError":
        return cls(GitHubErrorKind.INVALID_QUERY, INVALID_QUERY_MESSAGE, 422)

    @classmethod
    def user_not_found(cls) -> "GitHubAPIError":
        return cls(GitHubErrorKind.USER_NOT_FOUND, USER_NOT_FOUND_MESSAGE, 404)

    @classmethod
    def upstream(cls, status_code: int) -> "GitHubAPIError":
        return cls(GitHubErrorKind.UPSTREAM, f"GitHub API error: {status_code}", status_code)
