# ABOUTME: File-backed implementations package
# ABOUTME: Durable implementations persisting to the local filesystem

from .auth import FileTokenStore

__all__ = ["FileTokenStore"]
