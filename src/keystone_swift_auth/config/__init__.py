"""Configuration: environment-driven settings and logging."""

from .settings import KeystoneSettings, get_settings
from .logging_config import (
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    LogFormat,
    setup_logging,
)

__all__ = [
    "KeystoneSettings",
    "get_settings",
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "setup_logging",
]
