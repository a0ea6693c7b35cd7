# ABOUTME: Models package initialization
# ABOUTME: Exports token, refresh state and HTTP request models

# Authentication models
from .auth import (
    RefreshResult,
    Idle,
    Refreshing,
    Settled,
    RefreshPhase,
    RefreshState,
    SessionTokens,
    TokenParseError,
    decode_expiry,
    is_token_expired,
)

# HTTP models
from .http import RequestOptions, HttpResponse

__all__ = [
    # Authentication
    "RefreshResult",
    "Idle",
    "Refreshing",
    "Settled",
    "RefreshPhase",
    "RefreshState",
    "SessionTokens",
    "TokenParseError",
    "decode_expiry",
    "is_token_expired",
    # HTTP
    "RequestOptions",
    "HttpResponse",
]
