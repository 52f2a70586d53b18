"""Utility functions for MCP Compass."""

from .env import get_custom_headers, is_env_ssl_verify, is_env_truthy
from .logging import (
    get_masked_session_headers,
    log_config_param,
    mask_sensitive,
    setup_logging,
)

__all__ = [
    "get_custom_headers",
    "get_masked_session_headers",
    "is_env_ssl_verify",
    "is_env_truthy",
    "log_config_param",
    "mask_sensitive",
    "setup_logging",
]
