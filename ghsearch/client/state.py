"""
Search page state: user search, selection and repository pagination.

Overlapping actions are not coordinated; whichever response resolves last
wins. The debouncer only delays searches, it never cancels one in flight.
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

import httpx

from ghsearch.client.api import ClientApiError
from ghsearch.client.debounce import Debouncer
from ghsearch.config import settings
from ghsearch.services.github.types import (
    GitHubRepo,
    GitHubUser,
    RepositoryPage,
    UserSearchResult,
)

logger = logging.getLogger(__name__)


class SearchApi(Protocol):
    async def search_users(self, query: str) -> UserSearchResult: ...

    async def fetch_user_repositories(self, username: str, page: int = 1) -> RepositoryPage: ...


def _failure_message(error: Exception, fallback: str) -> str:
    return str(error) or fallback


@dataclass
class SearchState:
    """
    State behind the search page.

    Collapsing the selected user keeps its repositories in `repositories`;
    they are discarded the next time any user is expanded, which always
    refetches from page 1.
    """

    api: SearchApi
    debounce_seconds: float = field(default_factory=lambda: settings.search_debounce_seconds)

    query: str = ""
    users: list[GitHubUser] = field(default_factory=list)
    selected_user: GitHubUser | None = None
    repositories: list[GitHubRepo] = field(default_factory=list)
    cursor: int = 1
    is_loading_users: bool = False
    is_loading_repos: bool = False
    has_more_repos: bool = False
    error: str | None = None

    _debouncer: Debouncer = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._debouncer = Debouncer(self.debounce_seconds, self.search)

    # --- Derived view flags ---

    @property
    def show_results(self) -> bool:
        return not self.is_loading_users and bool(self.query.strip())

    @property
    def show_empty_prompt(self) -> bool:
        return not self.query and not self.users and not self.is_loading_users

    def is_expanded(self, user: GitHubUser) -> bool:
        return self.selected_user is not None and self.selected_user.id == user.id

    # --- Actions ---

    def set_query(self, text: str) -> None:
        """Record typed input and schedule a debounced search."""
        self.query = text
        if not text.strip():
            self._debouncer.cancel()
            self.users = []
            return
        self._debouncer.trigger()

    async def wait_for_search(self) -> None:
        """Wait until any scheduled search has run."""
        await self._debouncer.wait()

    async def search(self) -> None:
        """Run the search for the current query immediately."""
        query = self.query
        if not query.strip():
            self.users = []
            return

        self.is_loading_users = True
        self.error = None
        try:
            result = await self.api.search_users(query)
        except (ClientApiError, httpx.HTTPError) as e:
            logger.debug(f"User search failed for {query!r}: {e}")
            self.error = _failure_message(e, "An error occurred while searching users")
            self.users = []
        else:
            self.users = list(result.items)
        finally:
            self.is_loading_users = False

    async def select_user(self, user: GitHubUser) -> None:
        """Expand `user` and load its first page, or collapse it if already expanded."""
        if self.is_expanded(user):
            self.selected_user = None
            return

        self.selected_user = user
        self.repositories = []
        self.cursor = 1
        self.has_more_repos = False
        self.is_loading_repos = True
        self.error = None
        try:
            page = await self.api.fetch_user_repositories(user.login, 1)
        except (ClientApiError, httpx.HTTPError) as e:
            self.error = _failure_message(e, "Failed to fetch repositories")
            self.repositories = []
            self.has_more_repos = False
        else:
            self.repositories = list(page.items)
            self.has_more_repos = page.has_next_page
        finally:
            self.is_loading_repos = False

    async def load_more(self) -> None:
        """Append the next page of the selected user's repositories."""
        user = self.selected_user
        if user is None or self.is_loading_repos:
            return

        next_page = self.cursor + 1
        self.is_loading_repos = True
        self.error = None
        try:
            page = await self.api.fetch_user_repositories(user.login, next_page)
        except (ClientApiError, httpx.HTTPError) as e:
            self.error = _failure_message(e, "Failed to load more repositories")
        else:
            self.repositories = [*self.repositories, *page.items]
            self.has_more_repos = page.has_next_page
            self.cursor = next_page
        finally:
            self.is_loading_repos = False
