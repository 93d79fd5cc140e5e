"""Core Tasklist utilities.

This module exports core utilities for use throughout the application.
"""

from tasklist.core.config import AuthConfig, Settings, get_settings
from tasklist.core.logging import (
    bind_correlation_id,
    bind_user_id,
    clear_context,
    configure_logging,
    get_logger,
    mask_email,
)

__all__ = [
    "AuthConfig",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "bind_correlation_id",
    "bind_user_id",
    "clear_context",
    "mask_email",
]
