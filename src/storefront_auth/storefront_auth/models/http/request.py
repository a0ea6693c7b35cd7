# ABOUTME: Outbound request options model for authenticated calls
# ABOUTME: Carries method, headers and body, and merges the bearer Authorization header

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

AUTHORIZATION_HEADER = "Authorization"


def create_bearer_token(token: str) -> str:
    """
    Create a Bearer token string.

    Args:
        token: The token value.

    Returns:
        A Bearer token string.
    """
    return f"Bearer {token}"


class RequestOptions(BaseModel):
    """
    Options of an outbound HTTP request.

    The authenticated client treats these as opaque apart from the headers,
    into which it merges the Authorization header.
    """

    method: str = Field(default="GET", description="HTTP method")
    headers: Dict[str, str] = Field(default_factory=dict, description="Caller-supplied headers")
    content: Optional[bytes | str] = Field(default=None, description="Raw request body")
    json_body: Optional[Any] = Field(default=None, description="Body serialized as JSON")
    params: Optional[Dict[str, Any]] = Field(default=None, description="Query string parameters")
    timeout: Optional[float] = Field(default=None, gt=0, description="Per-request timeout in seconds")

    model_config = ConfigDict(frozen=True)

    def with_bearer_token(self, token: str) -> "RequestOptions":
        """
        Return a copy whose headers carry `Authorization: Bearer <token>`.

        Any caller-supplied Authorization header is replaced, whatever its
        case; every other header is preserved.
        """
        headers = {
            name: value for name, value in self.headers.items() if name.lower() != AUTHORIZATION_HEADER.lower()
        }
        headers[AUTHORIZATION_HEADER] = create_bearer_token(token)
        return self.model_copy(update={"headers": headers})
