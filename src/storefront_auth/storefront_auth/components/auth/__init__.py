# ABOUTME: Authentication components package exports
# ABOUTME: Exports the authenticated request client, refresh coordinator and session manager

from .refresh_coordinator import SingleFlightRefresher
from .request_client import AuthenticatedRequestClient
from .session_manager import SessionManager

__all__ = ["AuthenticatedRequestClient", "SessionManager", "SingleFlightRefresher"]
