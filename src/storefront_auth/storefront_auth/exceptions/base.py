# ABOUTME: Core exception classes for the storefront auth client
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class CoreException(Exception):
    """Base exception class for the storefront auth client.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the package inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize CoreException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class AuthenticationException(CoreException):
    """Exception raised for authentication errors.

    Used when a request cannot be authenticated, such as:
    - No access token stored
    - Access token expired and the refresh failed
    - Refresh token missing or rejected by the backend

    Callers are expected to route the user to re-authentication.
    """

    pass


class NoTokenAvailableError(AuthenticationException):
    """Raised when no usable access token could be produced for a request.

    Covers both "never had a token" and "had one, but the refresh failed";
    callers do not need to tell the two apart.
    """

    def __init__(self, message: str = "No valid token available", details: Dict[str, Any] | None = None):
        super().__init__(message, code="NO_TOKEN_AVAILABLE", details=details)


class StorageError(CoreException):
    """Exception raised for token storage failures.

    Used when a token store cannot read or persist credentials, such as:
    - File I/O errors
    - Corrupted or non-JSON storage contents
    - Permission problems on the storage location

    Should include details about the storage operation that failed.
    """

    pass
