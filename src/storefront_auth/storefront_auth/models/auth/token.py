# ABOUTME: Bearer token models and expiry decoding helpers
# ABOUTME: Decodes the JWT exp claim without verification and applies the refresh safety margin

import time
from dataclasses import dataclass

import jwt

DEFAULT_EXPIRY_MARGIN_SECONDS = 300


@dataclass(frozen=True)
class TokenParseError:
    """
    Result of a failed expiry decode.

    Returned, not raised, by `decode_expiry` so that callers handle an
    undecodable token as an explicit branch.
    """

    reason: str


@dataclass(frozen=True)
class SessionTokens:
    """Credential pair issued by a successful login."""

    access_token: str
    refresh_token: str | None = None


def decode_expiry(token: str) -> float | TokenParseError:
    """
    Read the expiry timestamp embedded in a bearer token.

    The token is decoded without signature verification: the client only needs
    the `exp` claim to decide whether a refresh is due, and the server remains
    the authority on validity.

    Args:
        token: A JWT access token.

    Returns:
        The `exp` claim as a Unix timestamp, or a `TokenParseError` when the
        token is malformed or carries no numeric `exp` claim.
    """
    if not token or not isinstance(token, str):
        return TokenParseError(reason="empty token")

    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError as e:
        return TokenParseError(reason=str(e) or type(e).__name__)

    exp = claims.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        return TokenParseError(reason="missing or non-numeric 'exp' claim")

    return float(exp)


def is_token_expired(
    token: str,
    margin_seconds: float = DEFAULT_EXPIRY_MARGIN_SECONDS,
    now: float | None = None,
) -> bool:
    """
    Check whether a token must be refreshed before use.

    A token counts as expired once `exp - margin_seconds` is earlier than the
    current time. Undecodable tokens always count as expired.

    Args:
        token: The access token to check.
        margin_seconds: How long before the real expiry the token stops being used.
        now: Current Unix time; defaults to `time.time()`.

    Returns:
        True if the token should not be sent as is.
    """
    expiry = decode_expiry(token)
    if isinstance(expiry, TokenParseError):
        return True

    current_time = time.time() if now is None else now
    return expiry - margin_seconds < current_time
