# ABOUTME: Authenticated request client attaching bearer tokens to outbound API calls
# ABOUTME: Refreshes expired tokens before sending and retries exactly once after a 401 response

from http import HTTPStatus

from loguru import logger

from storefront_auth.components.auth.refresh_coordinator import SingleFlightRefresher
from storefront_auth.config.auth import AuthClientSettings
from storefront_auth.config.settings import get_settings
from storefront_auth.exceptions import NoTokenAvailableError
from storefront_auth.implementations.file import FileTokenStore
from storefront_auth.implementations.http import HttpRefreshEndpoint, HttpxTransport
from storefront_auth.interfaces.auth import AbstractRefreshEndpoint, AbstractTokenStore
from storefront_auth.interfaces.http import AbstractHttpTransport
from storefront_auth.models.auth.refresh_state import RefreshState
from storefront_auth.models.auth.token import DEFAULT_EXPIRY_MARGIN_SECONDS, is_token_expired
from storefront_auth.models.http.request import RequestOptions
from storefront_auth.models.http.response import HttpResponse


class AuthenticatedRequestClient:
    """
    Sends requests to protected storefront endpoints with a valid bearer token.

    The client guarantees that an outbound call carries a non-expired access
    token whenever one can be obtained:
    - Tokens within `expiry_margin_seconds` of their embedded expiry (or whose
      expiry cannot be decoded) are refreshed before the request is sent.
    - A 401 response triggers one more refresh and, if it yields a token, one
      retry with the new token. The retried response is returned whatever its
      status, so a call makes at most two network attempts.
    - Concurrent callers share a single refresh (see `SingleFlightRefresher`).

    Construct one instance at application start and pass it to the code that
    needs it; `from_settings` wires the default collaborators.
    """

    def __init__(
        self,
        token_store: AbstractTokenStore,
        refresh_endpoint: AbstractRefreshEndpoint,
        transport: AbstractHttpTransport,
        expiry_margin_seconds: float = DEFAULT_EXPIRY_MARGIN_SECONDS,
        access_token_key: str = "authToken",
        refresh_token_key: str = "refreshToken",
    ):
        """
        Initialize the client.

        Args:
            token_store: Storage holding the access and refresh tokens.
            refresh_endpoint: Service exchanging a refresh token for a new access token.
            transport: Transport used for the protected requests.
            expiry_margin_seconds: How long before expiry an access token stops being used.
            access_token_key: Store key of the access token.
            refresh_token_key: Store key of the refresh token.
        """
        self._store = token_store
        self._transport = transport
        self.expiry_margin_seconds = expiry_margin_seconds
        self._refresher = SingleFlightRefresher(
            token_store,
            refresh_endpoint,
            access_token_key=access_token_key,
            refresh_token_key=refresh_token_key,
        )
        self._owned_transport: HttpxTransport | None = None

    @classmethod
    def from_settings(
        cls,
        settings: AuthClientSettings | None = None,
        token_store: AbstractTokenStore | None = None,
        refresh_endpoint: AbstractRefreshEndpoint | None = None,
        transport: AbstractHttpTransport | None = None,
    ) -> "AuthenticatedRequestClient":
        """
        Build a client from settings, filling in default collaborators.

        Defaults are a `FileTokenStore` at `TOKEN_STORE_PATH`, an `HttpxTransport`
        with `REQUEST_TIMEOUT_SECONDS`, and an `HttpRefreshEndpoint` at
        `refresh_url` sharing that transport. A transport created here is closed
        by `aclose`.
        """
        settings = settings or get_settings()

        owned_transport = None
        if transport is None:
            owned_transport = HttpxTransport(timeout=settings.REQUEST_TIMEOUT_SECONDS)
            transport = owned_transport

        client = cls(
            token_store=token_store or FileTokenStore(settings.TOKEN_STORE_PATH),
            refresh_endpoint=refresh_endpoint or HttpRefreshEndpoint(transport, settings.refresh_url),
            transport=transport,
            expiry_margin_seconds=settings.TOKEN_EXPIRY_MARGIN_SECONDS,
            access_token_key=settings.ACCESS_TOKEN_KEY,
            refresh_token_key=settings.REFRESH_TOKEN_KEY,
        )
        client._owned_transport = owned_transport
        return client

    @property
    def token_store(self) -> AbstractTokenStore:
        return self._store

    @property
    def access_token_key(self) -> str:
        return self._refresher.access_token_key

    @property
    def refresh_token_key(self) -> str:
        return self._refresher.refresh_token_key

    @property
    def refresh_state(self) -> RefreshState:
        """Current state of the refresh cycle."""
        return self._refresher.state

    @property
    def refresh_cycles(self) -> int:
        """Number of refresh cycles started by this client."""
        return self._refresher.cycles_started

    async def get_valid_token(self) -> str | None:
        """
        Return an access token that is safe to send.

        Returns:
            The stored access token if it is not expired, a refreshed token if it
            was, or None when there is no token or the refresh failed.
        """
        token = await self._store.get(self.access_token_key)
        if not token:
            return None

        if not is_token_expired(token, self.expiry_margin_seconds):
            return token

        logger.debug("Access token expired or undecodable, refreshing")
        return await self._refresher.refresh()

    async def refresh_access_token(self) -> str | None:
        """
        Force a refresh, joining one already in flight.

        Returns:
            The new access token, or None if the refresh failed.
        """
        return await self._refresher.refresh()

    async def make_authenticated_request(self, url: str, options: RequestOptions | None = None) -> HttpResponse:
        """
        Send a request with the bearer token attached.

        Args:
            url: The request target.
            options: Method, headers and body. Caller headers are kept, except
                that Authorization is always set by the client.

        Returns:
            The response of the last attempt, unchanged.

        Raises:
            NoTokenAvailableError: If no valid token could be produced. No
                request is sent in that case.
            Exception: Transport errors of the request propagate unchanged.
        """
        options = options or RequestOptions()

        token = await self.get_valid_token()
        if token is None:
            raise NoTokenAvailableError(details={"url": url})

        response = await self._transport.request(url, options.with_bearer_token(token))
        if response.status_code != HTTPStatus.UNAUTHORIZED:
            return response

        logger.info("Request rejected as unauthorized, refreshing token", url=url)
        new_token = await self._refresher.refresh()
        if new_token is None:
            return response

        return await self._transport.request(url, options.with_bearer_token(new_token))

    async def clear_tokens(self) -> None:
        """Remove the access and refresh tokens from the store."""
        await self._refresher.clear_tokens()

    async def aclose(self) -> None:
        """Release the transport created by `from_settings`, if any."""
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    async def __aenter__(self) -> "AuthenticatedRequestClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
