# ABOUTME: HTTP implementations package
# ABOUTME: httpx transport and the backend refresh endpoint client

from .auth import HttpRefreshEndpoint
from .transport import HttpxTransport

__all__ = ["HttpRefreshEndpoint", "HttpxTransport"]
