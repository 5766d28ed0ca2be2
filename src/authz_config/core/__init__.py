"""Core authz-config utilities.

This module exports core utilities for use throughout the package.
"""

from authz_config.core.config import Settings, get_settings
from authz_config.core.logging import (
    LoggingContext,
    bind_validation_pass,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "bind_validation_pass",
    "clear_context",
]
