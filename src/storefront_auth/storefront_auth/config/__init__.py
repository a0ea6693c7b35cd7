# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and utilities for the auth client

from storefront_auth.config._base import BaseCoreSettings
from storefront_auth.config.auth import AuthClientSettings
from storefront_auth.config.settings import CoreSettings, get_settings
from storefront_auth.config.logging import (
    LoggerConfig,
    LoggingSettings,
    setup_logging,
    build_logger_config,
    get_logger,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
)

__all__ = [
    "BaseCoreSettings",
    "AuthClientSettings",
    "CoreSettings",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "setup_logging",
    "build_logger_config",
    "get_logger",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
]
