from .refresh_endpoint import HttpRefreshEndpoint, RefreshPayload, RefreshResponseBody

__all__ = ["HttpRefreshEndpoint", "RefreshPayload", "RefreshResponseBody"]
