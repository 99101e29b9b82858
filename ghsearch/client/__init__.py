"""
Browser-side client package.

- api.py: ClientApi, the HTTP adapter for the proxy endpoints
- debounce.py: Debouncer that coalesces rapid query changes
- state.py: SearchState, the search/selection/pagination state machine
"""

from ghsearch.client.api import ClientApi, ClientApiError, create_proxy_http_client
from ghsearch.client.debounce import Debouncer
from ghsearch.client.state import SearchState

__all__ = [
    "ClientApi",
    "ClientApiError",
    "create_proxy_http_client",
    "Debouncer",
    "SearchState",
]
