# ABOUTME: Session lifecycle helpers around the authenticated request client
# ABOUTME: Stores tokens after login, checks the session at startup and clears user data on logout

from typing import List, Sequence

from loguru import logger

from storefront_auth.components.auth.request_client import AuthenticatedRequestClient
from storefront_auth.exceptions import StorageError
from storefront_auth.models.auth.token import SessionTokens

USER_PROFILE_KEY = "userProfile"

# Everything the storefront keeps about a signed-in user
USER_DATA_KEYS = (
    USER_PROFILE_KEY,
    "selectedAddress",
    "userAddresses",
    "cartItems",
    "deliveryInfo",
    "orderHistory",
    "paymentMethods",
    "userPreferences",
    "pushToken",
    "lastLoginTime",
    "userLocation",
    "searchHistory",
    "persist:address",
    "persist:user",
    "persist:cart",
)

# Substrings marking a store key as user data
USER_DATA_MARKERS = ("user", "auth", "token", "address", "cart")


class SessionManager:
    """
    Login, startup and logout flows of a storefront session.

    Tokens are created here after a successful OTP login, checked once when
    the application starts, and erased on logout. Token refresh itself stays
    with the `AuthenticatedRequestClient`.
    """

    def __init__(self, client: AuthenticatedRequestClient):
        self._client = client
        self._store = client.token_store

    async def start_session(self, tokens: SessionTokens) -> None:
        """
        Store the credentials issued by a successful login.

        Both tokens are replaced wholesale; a login without a refresh token
        drops any refresh token left from an earlier session.
        """
        await self._store.set(self._client.access_token_key, tokens.access_token)
        if tokens.refresh_token:
            await self._store.set(self._client.refresh_token_key, tokens.refresh_token)
        else:
            await self._store.remove([self._client.refresh_token_key])
        logger.info("Session started")

    async def initialize(self) -> bool:
        """
        Check at startup whether the stored session is usable.

        Returns:
            True if a valid access token is available (refreshing it if needed).
            On a storage failure the tokens are cleared and False is returned.
        """
        try:
            token = await self._client.get_valid_token()
        except StorageError as e:
            logger.error("Auth initialization failed", error=str(e))
            await self._clear_quietly()
            return False

        is_valid = token is not None
        logger.info("Auth initialization finished", authenticated=is_valid)
        return is_valid

    async def logout(self, extra_keys: Sequence[str] = ()) -> None:
        """
        End the session.

        Removes both tokens, the cached user profile and any additional
        user-data keys the application keeps in the same store.

        Args:
            extra_keys: Further store keys to erase.
        """
        keys = [self._client.access_token_key, self._client.refresh_token_key, USER_PROFILE_KEY, *extra_keys]
        await self._store.remove(keys)
        logger.info("Logout completed", cleared_keys=len(keys))

    async def complete_logout(self, extra_keys: Sequence[str] = ()) -> None:
        """
        End the session and erase every piece of user data.

        Removes both tokens and all `USER_DATA_KEYS` (addresses, cart,
        push token, cached history and persisted state slices), plus any
        extra keys given. Keys unrelated to the user, such as UI
        preferences stored under other names, are left alone.

        Args:
            extra_keys: Further store keys to erase.

        Raises:
            StorageError: If the store cannot remove the keys.
        """
        keys = [self._client.access_token_key, self._client.refresh_token_key, *USER_DATA_KEYS, *extra_keys]
        await self._store.remove(keys)
        logger.info("Complete logout finished", cleared_keys=len(keys))

    async def remaining_user_data(self) -> List[str]:
        """
        List store keys that still look like user data.

        A key counts as user data when its lowercased name contains one of
        `USER_DATA_MARKERS`. Useful to verify a logout left nothing behind.
        """
        keys = await self._store.keys()
        remaining = sorted(key for key in keys if any(marker in key.lower() for marker in USER_DATA_MARKERS))
        if remaining:
            logger.warning("User data remains in token store", keys=remaining)
        return remaining

    async def _clear_quietly(self) -> None:
        try:
            await self._client.clear_tokens()
        except StorageError as e:
            logger.error("Error clearing auth tokens", error=str(e))
