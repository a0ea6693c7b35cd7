# ABOUTME: Abstract token store interface for persisting access and refresh tokens
# ABOUTME: Defines the key-value contract the authenticated client reads and writes credentials through

from abc import ABC, abstractmethod
from typing import List, Sequence


class AbstractTokenStore(ABC):
    """
    Abstract key-value storage for authentication tokens.

    The authenticated client keeps the current access token and refresh token
    under two keys of a token store. Every write is a whole-value replacement
    of a single key; the client never performs partial updates. Production
    implementations must be durable across process restarts.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """
        Read the value stored under a key.

        Args:
            key: The storage key, e.g. the access token key.

        Returns:
            The stored string, or `None` if the key is absent.

        Raises:
            StorageError: If the underlying storage cannot be read.
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Args:
            key: The storage key.
            value: The value to store.

        Raises:
            StorageError: If the value cannot be persisted.
        """
        pass

    @abstractmethod
    async def remove(self, keys: Sequence[str]) -> None:
        """
        Remove several keys at once. Missing keys are ignored.

        Args:
            keys: The storage keys to erase.

        Raises:
            StorageError: If the keys cannot be removed.
        """
        pass

    @abstractmethod
    async def keys(self) -> List[str]:
        """
        List every key currently stored.

        Returns:
            The stored keys, in no particular order.

        Raises:
            StorageError: If the underlying storage cannot be read.
        """
        pass
