# ABOUTME: In-memory implementations package
# ABOUTME: Process-local implementations for tests and development

from .auth import InMemoryRefreshEndpoint, InMemoryTokenStore

__all__ = ["InMemoryRefreshEndpoint", "InMemoryTokenStore"]
