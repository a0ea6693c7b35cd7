# ABOUTME: Core implementations package exports
# ABOUTME: Contains concrete implementations of the client's collaborator interfaces

"""
Implementations

Concrete token stores, refresh endpoints and HTTP transports.
"""

from .file import FileTokenStore
from .http import HttpRefreshEndpoint, HttpxTransport
from .memory import InMemoryRefreshEndpoint, InMemoryTokenStore

__all__ = [
    "FileTokenStore",
    "HttpRefreshEndpoint",
    "HttpxTransport",
    "InMemoryRefreshEndpoint",
    "InMemoryTokenStore",
]
