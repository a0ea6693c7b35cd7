# ABOUTME: Exceptions package exports
# ABOUTME: Exports the structured exception hierarchy of the auth client

from storefront_auth.exceptions.base import (
    CoreException,
    AuthenticationException,
    NoTokenAvailableError,
    StorageError,
)

__all__ = [
    "CoreException",
    "AuthenticationException",
    "NoTokenAvailableError",
    "StorageError",
]
