# ABOUTME: Loguru configuration for the storefront auth client
# ABOUTME: Provides unified logging setup with console colorization and optional file output

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from storefront_auth.config._base import BaseCoreSettings
from storefront_auth.config.settings import get_settings


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Bound as `app` on every record
    app_name: str = "Storefront"

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_backtrace: bool = True
    console_diagnose: bool = False

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/storefront-auth.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
    file_rotation: str = "10 MB"
    file_retention: str = "14 days"
    file_compression: str = "gz"

    # Structured logging for file output
    structured_enabled: bool = False
    structured_level: str = "DEBUG"
    structured_path: Union[str, Path] = "logs/storefront-auth-structured.jsonl"

    # Error file output
    error_file_enabled: bool = False
    error_file_level: str = "ERROR"
    error_file_path: Union[str, Path] = "logs/storefront-auth-errors.log"

    # Performance settings
    enqueue: bool = True  # Async logging
    catch: bool = True  # Catch exceptions in logging


class LoggingSettings(BaseSettings):
    """Sink locations that can be configured via environment variables.

    Level, format and environment come from the application settings
    (`LOG_LEVEL`, `LOG_FORMAT`, `ENV`, `DEBUG`); these only say where the
    optional file sinks write.
    """

    log_file_enabled: bool = Field(default=False)
    log_file_path: str = Field(default="logs/storefront-auth.log")
    log_structured_path: str = Field(default="logs/storefront-auth-structured.jsonl")
    log_error_file_path: str = Field(default="logs/storefront-auth-errors.log")
    log_console_colorize: bool = Field(default=True)

    model_config = {"env_prefix": "STOREFRONT_AUTH_"}


def _ensure_parent(path: Union[str, Path]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def build_logger_config(
    settings: Optional[BaseCoreSettings] = None,
    sinks: Optional[LoggingSettings] = None,
) -> LoggerConfig:
    """
    Derive a logger configuration from the application settings.

    - `LOG_LEVEL` sets the level of every sink.
    - `LOG_FORMAT=json` adds the structured JSON sink.
    - `DEBUG` turns on variable values in tracebacks.
    - `ENV=production` always writes the log and error files and disables
      console colors.

    Args:
        settings: Application settings. Defaults to `get_settings()`.
        sinks: Sink locations. Defaults to values read from the environment.
    """
    settings = settings or get_settings()
    sinks = sinks or LoggingSettings()
    is_production = settings.ENV == "production"

    return LoggerConfig(
        app_name=settings.APP_NAME,
        console_level=settings.LOG_LEVEL,
        console_colorize=sinks.log_console_colorize and not is_production,
        console_backtrace=not is_production,
        console_diagnose=settings.DEBUG,
        file_enabled=sinks.log_file_enabled or is_production,
        file_level=settings.LOG_LEVEL,
        file_path=sinks.log_file_path,
        structured_enabled=settings.LOG_FORMAT == "json",
        structured_level=settings.LOG_LEVEL,
        structured_path=sinks.log_structured_path,
        error_file_enabled=is_production,
        error_file_path=sinks.log_error_file_path,
    )


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    The library never calls this itself; applications embedding the client
    decide when and how logging is configured.

    Args:
        config: Logger configuration. If None, it is built from the
            application settings by `build_logger_config`.
    """
    if config is None:
        config = build_logger_config()

    # Remove default handler
    logger.remove()
    logger.configure(extra={"app": config.app_name})

    if config.console_enabled:
        logger.add(
            sys.stdout,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.file_enabled:
        _ensure_parent(config.file_path)
        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.structured_enabled:
        _ensure_parent(config.structured_path)
        logger.add(
            config.structured_path,
            level=config.structured_level,
            format="{message}",
            serialize=True,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.error_file_enabled:
        _ensure_parent(config.error_file_path)
        logger.add(
            config.error_file_path,
            level=config.error_file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def configure_for_testing() -> None:
    """Configure logging for testing environment."""
    logger.remove()
    logger.add(
        sys.stdout,
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        colorize=True,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        catch=False,
    )


def configure_for_production() -> None:
    """Configure logging for production environment."""
    settings = get_settings().model_copy(update={"ENV": "production", "DEBUG": False})
    setup_logging(build_logger_config(settings))


def configure_for_development() -> None:
    """Configure logging for development environment."""
    settings = get_settings().model_copy(update={"ENV": "development", "DEBUG": True, "LOG_LEVEL": "DEBUG"})
    setup_logging(build_logger_config(settings))
