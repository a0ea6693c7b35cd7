# ABOUTME: Abstract refresh endpoint interface for exchanging refresh tokens
# ABOUTME: Defines the contract for services that mint a new access token from a refresh token

from abc import ABC, abstractmethod

from storefront_auth.models.auth.refresh_result import RefreshResult


class AbstractRefreshEndpoint(ABC):
    """
    Abstract remote service exchanging a refresh token for a new access token.
    """

    @abstractmethod
    async def refresh(self, refresh_token: str) -> RefreshResult:
        """
        Exchange a refresh token for a new access token.

        Rejections by the backend (non-success status, `success: false`,
        malformed body) are reported through a failed `RefreshResult`.

        Args:
            refresh_token: The current refresh token, sent as a bearer credential.

        Returns:
            RefreshResult: The new access token on success, or the failure reason.

        Raises:
            Exception: Transport failures (offline, DNS, timeout) may propagate;
                the refresh coordinator treats them exactly like a failed result.
        """
        pass
