from .transport import AbstractHttpTransport

__all__ = ["AbstractHttpTransport"]
