from .token_store import FileTokenStore

__all__ = ["FileTokenStore"]
