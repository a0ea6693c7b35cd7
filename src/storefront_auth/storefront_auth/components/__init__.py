from .auth import AuthenticatedRequestClient, SessionManager, SingleFlightRefresher

__all__ = ["AuthenticatedRequestClient", "SessionManager", "SingleFlightRefresher"]
