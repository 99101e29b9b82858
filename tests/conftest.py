"""Root conftest — test infrastructure for all tests.

Provides:
- Mocked GitHub API (no test ever reaches api.github.com)
- API client wired to the mocked GitHub API through dependency overrides
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from ghsearch.config.settings import settings
from ghsearch.services.github import GitHubClient


@pytest.fixture
def anyio_backend() -> str:
    """The code under test is asyncio-based (asyncio.sleep, asyncio tasks)."""
    return "asyncio"


@pytest.fixture(autouse=True)
def _upstream_github(monkeypatch):
    """SAFETY: never serve fixtures or hit GitHub unless a test opts in."""
    monkeypatch.setattr(settings, "use_in_memory_github", False)
    monkeypatch.setattr(settings, "search_results_limit", 5)
    monkeypatch.setattr(settings, "repos_per_page", 30)


@pytest.fixture
def github_api() -> AsyncMock:
    """GitHub client double; configure return values/side effects per test."""
    return AsyncMock(spec=GitHubClient)


# ─────────────────────────────────────────────────────────────────────────────
# API Client
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
async def api_client(github_api: AsyncMock):
    """HTTP client for the ASGI app with the GitHub dependency replaced."""
    from ghsearch.api.deps import get_github_api
    from ghsearch.main import app

    app.dependency_overrides[get_github_api] = lambda: github_api

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
