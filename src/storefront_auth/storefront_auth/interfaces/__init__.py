# ABOUTME: Core interfaces package exports
# ABOUTME: Exports the abstract collaborators of the authenticated request client

# Authentication interfaces
from .auth import AbstractRefreshEndpoint, AbstractTokenStore

# HTTP interfaces
from .http import AbstractHttpTransport

__all__ = [
    # Authentication
    "AbstractRefreshEndpoint",
    "AbstractTokenStore",
    # HTTP
    "AbstractHttpTransport",
]
