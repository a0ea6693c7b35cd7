# ABOUTME: Main configuration composition for the storefront auth client
# ABOUTME: Assembles base and authentication settings into a single, accessible object

from functools import lru_cache

from ._base import BaseCoreSettings
from .auth import AuthClientSettings


class CoreSettings(BaseCoreSettings, AuthClientSettings):
    """Represents the complete, composed configuration for the client.

    Each settings module stays self-contained and this class combines them
    through inheritance, so the application works against one unified
    settings object. `get_settings` provides a cached instance of it.
    """

    pass


@lru_cache
def get_settings() -> CoreSettings:
    """Provides a cached instance of the client settings.

    The cache ensures environment variables and the `.env` file are read once,
    giving a consistent configuration state. Call `get_settings.cache_clear()`
    to force a reload.

    Returns:
        A single, cached instance of the CoreSettings class.
    """
    return CoreSettings()
