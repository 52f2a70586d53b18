"""Logging utilities for MCP Compass.

Logs always go to stderr by default because stdout carries the MCP
protocol stream when the server runs over stdio.
"""

import logging
import sys
from typing import TextIO

SENSITIVE_HEADERS = {"authorization", "cookie", "proxy-authorization", "x-api-key"}


def setup_logging(
    level: int = logging.WARNING, stream: TextIO | None = None
) -> logging.Logger:
    """Configure the root logger for the application.

    Args:
        level: Logging level for the root logger
        stream: Output stream for log records (defaults to stderr)

    Returns:
        The configured ``mcp-compass`` logger.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Drop handlers installed by earlier calls so records are not duplicated
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    root_logger.addHandler(handler)

    logger = logging.getLogger("mcp-compass")
    logger.setLevel(level)
    return logger


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask all but the first and last ``keep_chars`` characters of a value.

    Args:
        value: The value to mask
        keep_chars: Number of characters to keep visible at each end

    Returns:
        The masked value, ``"Not Provided"`` for empty input.
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def get_masked_session_headers(headers: dict[str, str]) -> dict[str, str]:
    """Return a copy of session headers with credential values masked."""
    masked = {}
    for name, value in headers.items():
        if name.lower() in SENSITIVE_HEADERS:
            masked[name] = mask_sensitive(str(value))
        else:
            masked[name] = value
    return masked


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log a configuration parameter at debug level, masking it if sensitive."""
    display_value = mask_sensitive(value) if sensitive else value
    logger.debug(f"{service} {param}: {display_value}")
