# ABOUTME: HTTP implementation of AbstractRefreshEndpoint for the storefront backend
# ABOUTME: Posts the refresh token as a bearer credential and parses the access token from the JSON reply

from typing import Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from storefront_auth.interfaces.auth import AbstractRefreshEndpoint
from storefront_auth.interfaces.http import AbstractHttpTransport
from storefront_auth.models.auth.refresh_result import RefreshResult
from storefront_auth.models.http.request import RequestOptions


class RefreshPayload(BaseModel):
    """Token fields of a refresh reply."""

    access_token: Optional[str] = Field(default=None, alias="accessToken")
    refresh_token: Optional[str] = Field(default=None, alias="refreshToken")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RefreshResponseBody(RefreshPayload):
    """
    Body of the backend's refresh reply.

    The backend wraps tokens as `{"success": true, "data": {"accessToken": ...}}`;
    tokens at the top level are accepted as well.
    """

    success: bool = False
    data: Optional[RefreshPayload] = None

    @property
    def issued_access_token(self) -> str | None:
        if self.data is not None and self.data.access_token:
            return self.data.access_token
        return self.access_token

    @property
    def issued_refresh_token(self) -> str | None:
        if self.data is not None and self.data.refresh_token:
            return self.data.refresh_token
        return self.refresh_token


class HttpRefreshEndpoint(AbstractRefreshEndpoint):
    """
    Calls the backend refresh endpoint over HTTP.

    Sends `POST <refresh_url>` with `Authorization: Bearer <refresh token>`.
    A non-2xx status, `success: false`, a missing access token or an
    undecodable body all yield a failed `RefreshResult`. Transport exceptions
    are not caught here.
    """

    def __init__(self, transport: AbstractHttpTransport, refresh_url: str):
        """
        Initialize the endpoint.

        Args:
            transport: Transport used to reach the backend.
            refresh_url: Absolute URL of the refresh endpoint.
        """
        self._transport = transport
        self.refresh_url = refresh_url

    async def refresh(self, refresh_token: str) -> RefreshResult:
        options = RequestOptions(
            method="POST",
            headers={"Content-Type": "application/json"},
        ).with_bearer_token(refresh_token)

        response = await self._transport.request(self.refresh_url, options)

        if not 200 <= response.status_code < 300:
            return RefreshResult.failed(f"refresh endpoint returned HTTP {response.status_code}")

        try:
            body = RefreshResponseBody.model_validate_json(response.content)
        except ValidationError as e:
            logger.debug("Malformed refresh response", errors=e.error_count())
            return RefreshResult.failed("malformed refresh response")

        access_token = body.issued_access_token
        if not body.success or not access_token:
            return RefreshResult.failed("refresh response did not contain an access token")

        return RefreshResult.succeeded(access_token, body.issued_refresh_token)
