# ABOUTME: In-memory implementation of AbstractTokenStore
# ABOUTME: Keeps tokens in a process-local dictionary for testing and development environments

from typing import Dict, List, Sequence

from storefront_auth.interfaces.auth import AbstractTokenStore


class InMemoryTokenStore(AbstractTokenStore):
    """
    In-memory implementation of AbstractTokenStore.

    Tokens live in a plain dictionary and are lost when the process exits.
    Useful for tests and for short-lived tools; applications that must keep
    users logged in across restarts should use `FileTokenStore`.
    """

    def __init__(self, initial: Dict[str, str] | None = None):
        """
        Initialize the store.

        Args:
            initial: Optional key/value pairs to pre-populate the store with.
        """
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, keys: Sequence[str]) -> None:
        for key in keys:
            self._data.pop(key, None)

    async def keys(self) -> List[str]:
        return list(self._data)

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of the stored key/value pairs."""
        return dict(self._data)
