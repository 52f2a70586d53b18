"""MCP Compass: recommends existing MCP servers for a described capability."""

import logging
import os
import sys

from dotenv import load_dotenv

from .compass.config import SERVER_NAME, SERVER_VERSION
from .utils.env import is_env_truthy
from .utils.logging import setup_logging

__version__ = SERVER_VERSION

logger = logging.getLogger("mcp-compass")


def _get_logging_level() -> int:
    """Pick the log level from MCP_VERY_VERBOSE / MCP_VERBOSE."""
    if is_env_truthy("MCP_VERY_VERBOSE"):
        return logging.DEBUG
    if is_env_truthy("MCP_VERBOSE"):
        return logging.INFO
    return logging.WARNING


def main() -> None:
    """Run the MCP Compass server over stdio."""
    # .env values never override variables already set in the environment
    env_file = os.getenv("MCP_COMPASS_ENV_FILE")
    if env_file:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)

    log_stream = sys.stdout if is_env_truthy("MCP_LOGGING_STDOUT") else sys.stderr
    setup_logging(_get_logging_level(), log_stream)

    from .servers import compass_mcp

    logger.info(f"Starting {SERVER_NAME} {SERVER_VERSION} on stdio transport")
    compass_mcp.run(transport="stdio")


__all__ = ["__version__", "main"]
