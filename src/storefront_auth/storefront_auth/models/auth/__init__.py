from .refresh_result import RefreshResult
from .refresh_state import Idle, Refreshing, Settled, RefreshPhase, RefreshState
from .token import (
    DEFAULT_EXPIRY_MARGIN_SECONDS,
    SessionTokens,
    TokenParseError,
    decode_expiry,
    is_token_expired,
)

__all__ = [
    "RefreshResult",
    "Idle",
    "Refreshing",
    "Settled",
    "RefreshPhase",
    "RefreshState",
    "DEFAULT_EXPIRY_MARGIN_SECONDS",
    "SessionTokens",
    "TokenParseError",
    "decode_expiry",
    "is_token_expired",
]
