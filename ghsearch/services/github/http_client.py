"""
HTTP client factory for GitHub API operations.

Each proxy request gets its own AsyncClient, opened and closed around the
request, so no client state is shared between requests.
"""

import httpx

from ghsearch.config import settings


def create_github_http_client(
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build an HTTP client configured for the GitHub API.

    Redirects are followed, so renamed users and moved repositories resolve
    to their new location instead of surfacing as a 3xx error.

    Args:
        transport: Optional transport override (tests pass a MockTransport)

    Returns:
        A new httpx.AsyncClient; the caller owns it and must close it
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            settings.github_timeout_seconds,
            connect=settings.github_connect_timeout_seconds,
        ),
        limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        follow_redirects=True,
        transport=transport,
    )
