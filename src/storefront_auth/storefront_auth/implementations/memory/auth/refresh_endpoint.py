# ABOUTME: In-memory implementation of AbstractRefreshEndpoint issuing signed JWT access tokens
# ABOUTME: Simulates the backend refresh service for testing and local development

import secrets
import time
import uuid
from typing import Dict

import jwt

from storefront_auth.interfaces.auth import AbstractRefreshEndpoint
from storefront_auth.models.auth.refresh_result import RefreshResult
from storefront_auth.models.auth.token import SessionTokens


class InMemoryRefreshEndpoint(AbstractRefreshEndpoint):
    """
    In-memory stand-in for the backend refresh service.

    Sessions are created with `issue_session`, which returns an access token
    and an opaque refresh token. `refresh` exchanges a known refresh token for
    a newly signed JWT access token, optionally rotating the refresh token.

    Features:
    - HS256-signed JWT access tokens carrying `sub`, `iat`, `exp` and `jti`
    - Configurable access token TTL
    - Optional refresh token rotation
    - Refresh token revocation
    - Call counting for assertions in tests

    Note:
        All sessions are lost when the process exits.
    """

    def __init__(
        self,
        access_ttl: int = 900,
        rotate_refresh_tokens: bool = False,
        signing_key: str | None = None,
        algorithm: str = "HS256",
    ):
        """
        Initialize the endpoint.

        Args:
            access_ttl: Lifetime of minted access tokens in seconds (default: 15 minutes)
            rotate_refresh_tokens: Issue a new refresh token on every successful refresh
            signing_key: HMAC key for access tokens; a random key is generated if omitted
            algorithm: JWT signing algorithm
        """
        self.access_ttl = access_ttl
        self.rotate_refresh_tokens = rotate_refresh_tokens
        self.signing_key = signing_key or secrets.token_hex(32)
        self.algorithm = algorithm

        # refresh token -> user id
        self._sessions: Dict[str, str] = {}
        self.call_count = 0

    def mint_access_token(self, user_id: str, ttl: int | None = None) -> str:
        """
        Create a signed access token for a user.

        Args:
            user_id: Subject of the token.
            ttl: Lifetime in seconds; defaults to `access_ttl`. May be negative
                to produce an already expired token.

        Returns:
            The encoded JWT.
        """
        now = int(time.time())
        payload = {
            "sub": user_id,
            "iat": now,
            "exp": now + (self.access_ttl if ttl is None else ttl),
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self.signing_key, algorithm=self.algorithm)

    def issue_session(self, user_id: str, access_ttl: int | None = None) -> SessionTokens:
        """
        Register a new session, as a successful OTP login would.

        Returns:
            The access/refresh token pair of the session.
        """
        refresh_token = secrets.token_urlsafe(48)
        self._sessions[refresh_token] = user_id
        return SessionTokens(access_token=self.mint_access_token(user_id, access_ttl), refresh_token=refresh_token)

    def revoke(self, refresh_token: str) -> None:
        """Invalidate a refresh token. Unknown tokens are ignored."""
        self._sessions.pop(refresh_token, None)

    async def refresh(self, refresh_token: str) -> RefreshResult:
        self.call_count += 1

        user_id = self._sessions.get(refresh_token)
        if user_id is None:
            return RefreshResult.failed("unknown or revoked refresh token")

        new_refresh_token = None
        if self.rotate_refresh_tokens:
            del self._sessions[refresh_token]
            new_refresh_token = secrets.token_urlsafe(48)
            self._sessions[new_refresh_token] = user_id

        return RefreshResult.succeeded(self.mint_access_token(user_id), new_refresh_token)
