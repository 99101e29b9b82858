"""Centralized error transformation for the proxy endpoints.

Maps GitHub service failures to `{"error": message}` JSON responses and
logs each failure once, tagged with the endpoint that produced it.
"""

import logging
from collections.abc import MutableMapping
from typing import Any, assert_never

from fastapi.responses import JSONResponse

from ghsearch.services.github import GitHubAPIError, GitHubErrorKind


class EndpointLogger(logging.LoggerAdapter):
    """Prefixes messages with `[<endpoint>]` and records `endpoint` on each log record."""

    def __init__(self, logger: logging.Logger, endpoint: str):
        super().__init__(logger, {"endpoint": endpoint})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        msg, kwargs = super().process(msg, kwargs)
        return f"[{self.extra['endpoint']}] {msg}", kwargs


def map_github_error(error: GitHubAPIError) -> tuple[int, str]:
    """Map a GitHub service failure to an HTTP status and message."""
    match error.kind:
        case GitHubErrorKind.EMPTY_QUERY | GitHubErrorKind.EMPTY_USERNAME:
            return 400, error.message
        case GitHubErrorKind.RATE_LIMITED:
            return 403, error.message
        case GitHubErrorKind.INVALID_QUERY:
            return 422, error.message
        case GitHubErrorKind.USER_NOT_FOUND:
            return 404, error.message
        case GitHubErrorKind.UPSTREAM:
            return error.status_code, error.message
        case _:
            assert_never(error.kind)


def map_unknown_error(error: Exception, fallback_message: str) -> tuple[int, str]:
    """Anything that is not a GitHub service failure is a 500."""
    return 500, str(error) or fallback_message


def error_response(
    error: Exception,
    logger: logging.LoggerAdapter,
    fallback_message: str,
) -> JSONResponse:
    """
    Translate a failure raised while serving a proxy request.

    Args:
        error: The exception raised by the GitHub client
        logger: Endpoint-tagged logger that receives the failure line
        fallback_message: Message used when an unknown error carries none

    Returns:
        JSONResponse with `{"error": message}` and the mapped status
    """
    if isinstance(error, GitHubAPIError):
        status_code, message = map_github_error(error)
    else:
        status_code, message = map_unknown_error(error, fallback_message)

    logger.error(f"{message} (status: {status_code})")
    return JSONResponse(status_code=status_code, content={"error": message})


def bad_request(message: str) -> JSONResponse:
    """400 for a missing or malformed request parameter."""
    return JSONResponse(status_code=400, content={"error": message})
