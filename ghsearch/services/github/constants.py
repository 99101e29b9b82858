"""Constants for GitHub service."""

GITHUB_API_BASE_URL = "https://api.github.com"

# Headers sent with every upstream request
GITHUB_API_HEADERS: dict[str, str] = {
    "Accept": "application/vnd.github.v3+json",
    "User-Agent": "GitHub-User-Search-App",
}

DEFAULT_SEARCH_LIMIT = 5
DEFAULT_REPOS_PER_PAGE = 30

# User-facing failure messages
EMPTY_QUERY_MESSAGE = "Search query cannot be empty"
EMPTY_USERNAME_MESSAGE = "Username cannot be empty"
RATE_LIMITED_MESSAGE = "GitHub API rate limit exceeded. Please try again later."
INVALID_QUERY_MESSAGE = "Invalid search query"
USER_NOT_FOUND_MESSAGE = "User not found"
