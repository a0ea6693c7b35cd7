# ABOUTME: Storefront auth client package initialization
# ABOUTME: Exposes the authenticated request client and its collaborators

"""
Storefront authenticated request client.

This package keeps outbound calls to the storefront commerce API authorized:
it attaches bearer access tokens, refreshes them shortly before they expire,
shares one in-flight refresh between concurrent callers, and retries once
when the server answers 401. Interfaces, models and implementations are kept
apart so collaborators (token storage, refresh endpoint, HTTP transport) can
be swapped.
"""

from storefront_auth.components.auth import AuthenticatedRequestClient, SessionManager, SingleFlightRefresher
from storefront_auth.exceptions import AuthenticationException, NoTokenAvailableError
from storefront_auth.models.auth import SessionTokens
from storefront_auth.models.http import RequestOptions

__version__ = "0.1.0"

__all__ = [
    "AuthenticatedRequestClient",
    "SessionManager",
    "SingleFlightRefresher",
    "AuthenticationException",
    "NoTokenAvailableError",
    "SessionTokens",
    "RequestOptions",
]
