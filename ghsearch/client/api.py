"""
HTTP adapter for the proxy endpoints.

Status codes are not interpreted: a failed response only contributes the
`error` message from its JSON body.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from ghsearch.config import settings
from ghsearch.services.github.types import (
    GitHubRepo,
    GitHubUser,
    RepositoryPage,
    UserSearchResult,
)

logger = logging.getLogger(__name__)

BASE_PATH = "/api"

USERS_FALLBACK = "Failed to fetch users"
REPOS_FALLBACK = "Failed to fetch user repositories"

# Raised by response.json() and the from_api constructors on an unexpected body
MALFORMED_PAYLOAD_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


class ClientApiError(Exception):
    """A proxy call failed; the message is meant to be shown to the user."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def create_proxy_http_client(base_url: str | None = None) -> httpx.AsyncClient:
    """Build an HTTP client pointed at the proxy (defaults to settings.proxy_base_url)."""
    return httpx.AsyncClient(base_url=base_url or settings.proxy_base_url)


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body: Any = response.json()
    except ValueError:
        logger.debug(f"Non-JSON error body from proxy (status {response.status_code})")
        return fallback
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return fallback


class ClientApi:
    """Calls the /api proxy and returns typed payloads."""

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def search_users(self, query: str) -> UserSearchResult:
        response = await self._http.get(f"{BASE_PATH}/users", params={"q": query})
        if not response.is_success:
            raise ClientApiError(_error_message(response, USERS_FALLBACK))

        try:
            data = response.json()
            return UserSearchResult(
                items=[GitHubUser.from_api(u) for u in data.get("items") or []],
                total_count=data.get("total_count", 0),
            )
        except MALFORMED_PAYLOAD_ERRORS as e:
            logger.warning(f"Malformed user search payload from proxy: {e!r}")
            raise ClientApiError(USERS_FALLBACK) from e

    async def fetch_user_repositories(self, username: str, page: int = 1) -> RepositoryPage:
        response = await self._http.get(
            f"{BASE_PATH}/users/{quote(username, safe='')}/repos",
            params={"page": page},
        )
        if not response.is_success:
            raise ClientApiError(_error_message(response, REPOS_FALLBACK))

        try:
            data = response.json()
            return RepositoryPage(
                items=[GitHubRepo.from_api(r) for r in data.get("items") or []],
                has_next_page=bool(data.get("hasNextPage", False)),
            )
        except MALFORMED_PAYLOAD_ERRORS as e:
            logger.warning(f"Malformed repository payload from proxy: {e!r}")
            raise ClientApiError(REPOS_FALLBACK) from e
