# ABOUTME: Authentication interfaces package exports
# ABOUTME: Exports abstract classes for token storage and token refresh

from .refresh_endpoint import AbstractRefreshEndpoint
from .token_store import AbstractTokenStore

__all__ = [
    "AbstractRefreshEndpoint",
    "AbstractTokenStore",
]
