# ABOUTME: Memory-based authentication collaborators for testing and development
# ABOUTME: Provides InMemoryTokenStore and InMemoryRefreshEndpoint classes

from .refresh_endpoint import InMemoryRefreshEndpoint
from .token_store import InMemoryTokenStore

__all__ = ["InMemoryRefreshEndpoint", "InMemoryTokenStore"]
