from ghsearch.api.v1 import users

__all__ = [
    "users",
]
