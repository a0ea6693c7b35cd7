# ABOUTME: Outcome model for refresh endpoint calls
# ABOUTME: Carries the new access token on success or a failure reason otherwise

from dataclasses import dataclass


@dataclass(frozen=True)
class RefreshResult:
    """
    Outcome of exchanging a refresh token for a new access token.

    Attributes:
        success: Whether the backend issued a new access token.
        access_token: The new access token when `success` is True.
        refresh_token: A rotated refresh token, if the backend returned one.
        reason: Short description of why the refresh failed.
    """

    success: bool
    access_token: str | None = None
    refresh_token: str | None = None
    reason: str | None = None

    @classmethod
    def succeeded(cls, access_token: str, refresh_token: str | None = None) -> "RefreshResult":
        return cls(success=True, access_token=access_token, refresh_token=refresh_token)

    @classmethod
    def failed(cls, reason: str) -> "RefreshResult":
        return cls(success=False, reason=reason)
