"""
GitHub API helper utilities.

Maps upstream status codes to GitHubAPIError kinds and reads the pagination
and rate limit headers of GitHub responses.
"""

import logging

import httpx

from ghsearch.services.github.exceptions import GitHubAPIError

logger = logging.getLogger(__name__)


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get("X-RateLimit-Remaining")
        self.reset = response.headers.get("X-RateLimit-Reset")

    @property
    def reset_timestamp(self) -> int | None:
        """Get reset timestamp as integer, or None if missing or not numeric."""
        if not self.reset:
            return None
        try:
            return int(self.reset)
        except ValueError:
            return None


def has_next_page(response: httpx.Response) -> bool:
    """True when the Link header advertises a `rel="next"` relation."""
    link_header = response.headers.get("Link", "")
    return 'rel="next"' in link_header


def _rate_limited_error(response: httpx.Response) -> GitHubAPIError:
    rate_info = RateLimitInfo(response)
    logger.warning(
        f"GitHub returned 403 (remaining={rate_info.remaining}, reset={rate_info.reset})"
    )
    return GitHubAPIError.rate_limited(reset=rate_info.reset_timestamp)


def raise_for_search_status(response: httpx.Response) -> None:
    """
    Raise the matching GitHubAPIError for a failed user search.

    Raises:
        GitHubAPIError: RATE_LIMITED on 403, INVALID_QUERY on 422,
            UPSTREAM for any other non-2xx status
    """
    if response.is_success:
        return
    if response.status_code == 403:
        raise _rate_limited_error(response)
    elif response.status_code == 422:
        raise GitHubAPIError.invalid_query()
    raise GitHubAPIError.upstream(response.status_code)


def raise_for_repos_status(response: httpx.Response) -> None:
    """
    Raise the matching GitHubAPIError for a failed repository listing.

    Raises:
        GitHubAPIError: RATE_LIMITED on 403, USER_NOT_FOUND on 404,
            UPSTREAM for any other non-2xx status
    """
    if response.is_success:
        return
    if response.status_code == 403:
        raise _rate_limited_error(response)
    elif response.status_code == 404:
        raise GitHubAPIError.user_not_found()
    raise GitHubAPIError.upstream(response.status_code)
