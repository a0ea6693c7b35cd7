# ABOUTME: Single-flight coordinator for access token refresh
# ABOUTME: Runs at most one refresh cycle at a time and shares its outcome with every concurrent caller

import asyncio
from typing import Sequence

from loguru import logger

from storefront_auth.exceptions import StorageError
from storefront_auth.interfaces.auth import AbstractRefreshEndpoint, AbstractTokenStore
from storefront_auth.models.auth.refresh_state import Idle, Refreshing, Settled, RefreshState


class SingleFlightRefresher:
    """
    Coordinates access token refreshes so that concurrent callers share one cycle.

    The refresher is a small state machine: `Idle -> Refreshing -> Settled -> Idle`.
    The first caller to request a refresh while `Idle` creates the cycle task and
    enters `Refreshing` in the same synchronous step, so no other caller can observe
    `Idle` in between. Callers arriving while `Refreshing` await the same task.
    When the cycle finishes it records `Settled` and immediately returns to `Idle`
    before any waiter resumes; a later caller therefore always starts a fresh cycle.

    A cycle:
    1. Reads the refresh token. If there is none, clears all tokens and settles with None.
    2. Calls the refresh endpoint with it.
    3. On success, writes the new access token (and a rotated refresh token, if any)
       to the store and settles with the new access token.
    4. On a failed result or any exception, clears all tokens and settles with None.
       The refresh itself is never retried.

    Cycles run as their own task and waiters await them through `asyncio.shield`,
    so cancelling a caller never aborts a refresh that has already started.
    """

    def __init__(
        self,
        token_store: AbstractTokenStore,
        refresh_endpoint: AbstractRefreshEndpoint,
        access_token_key: str = "authToken",
        refresh_token_key: str = "refreshToken",
    ):
        """
        Initialize the refresher.

        Args:
            token_store: Storage holding the access and refresh tokens.
            refresh_endpoint: Service exchanging a refresh token for a new access token.
            access_token_key: Store key of the access token.
            refresh_token_key: Store key of the refresh token.
        """
        self._store = token_store
        self._endpoint = refresh_endpoint
        self.access_token_key = access_token_key
        self.refresh_token_key = refresh_token_key

        self._state: RefreshState = Idle()
        self._cycles_started = 0

    @property
    def state(self) -> RefreshState:
        """The current refresh state."""
        return self._state

    @property
    def cycles_started(self) -> int:
        """Number of refresh cycles started since creation."""
        return self._cycles_started

    @property
    def token_keys(self) -> Sequence[str]:
        return [self.access_token_key, self.refresh_token_key]

    async def refresh(self) -> str | None:
        """
        Obtain a freshly refreshed access token.

        Joins the in-flight cycle if there is one, otherwise starts a new cycle.

        Returns:
            The new access token, or None if the refresh failed. On failure the
            token store no longer holds any tokens.
        """
        state = self._state
        if isinstance(state, Refreshing):
            logger.debug("Joining in-flight token refresh")
            return await asyncio.shield(state.handle)

        # Check and set happen without an await in between.
        handle = asyncio.create_task(self._run_cycle())
        self._transition(Refreshing(handle))
        self._cycles_started += 1
        return await asyncio.shield(handle)

    async def clear_tokens(self) -> None:
        """
        Remove both tokens from the store.

        Raises:
            StorageError: If the store cannot remove the keys.
        """
        await self._store.remove(self.token_keys)
        logger.info("Auth tokens cleared")

    async def _run_cycle(self) -> str | None:
        try:
            token = await self._perform_refresh()
            self._transition(Settled(token))
            return token
        finally:
            self._transition(Idle())

    async def _perform_refresh(self) -> str | None:
        try:
            refresh_token = await self._store.get(self.refresh_token_key)
            if not refresh_token:
                logger.info("No refresh token stored, ending session")
                await self._discard_session()
                return None

            result = await self._endpoint.refresh(refresh_token)
            if not result.success or not result.access_token:
                logger.warning("Token refresh rejected", reason=result.reason)
                await self._discard_session()
                return None

            await self._store.set(self.access_token_key, result.access_token)
            if result.refresh_token:
                await self._store.set(self.refresh_token_key, result.refresh_token)

            logger.info("Access token refreshed")
            return result.access_token

        except Exception as e:
            logger.warning("Token refresh failed", error=str(e), error_type=type(e).__name__)
            await self._discard_session()
            return None

    async def _discard_session(self) -> None:
        """Clear tokens after a failed refresh; a storage failure here is logged, not raised."""
        try:
            await self.clear_tokens()
        except StorageError as e:
            logger.opt(exception=e).error("Error clearing auth tokens", error=str(e))

    def _transition(self, new_state: RefreshState) -> None:
        logger.debug("Refresh state transition", old=self._state.phase.value, new=new_state.phase.value)
        self._state = new_state
