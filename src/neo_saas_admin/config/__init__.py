"""Configuration module for neo-saas-admin."""

from .constants import (
    ApiPaths,
    HttpMethod,
    ResponseType,
    SortOrder,
    DefaultSortKeys,
    FallbackMessages,
)
from .logging_config import (
    setup_logging,
    get_logger,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)
from .settings import SaasAdminSettings, get_settings

__all__ = [
    # Constants
    "ApiPaths",
    "HttpMethod",
    "ResponseType",
    "SortOrder",
    "DefaultSortKeys",
    "FallbackMessages",

    # Logging
    "setup_logging",
    "get_logger",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",

    # Settings
    "SaasAdminSettings",
    "get_settings",
]
