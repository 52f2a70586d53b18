"""Environment variable helpers for MCP Compass."""

import logging
import os

logger = logging.getLogger("mcp-compass.utils.env")

TRUTHY_VALUES = ("true", "1", "yes", "y", "on")


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if an environment variable is set to a truthy value.

    Args:
        env_var_name: Name of the environment variable to check
        default: Value used when the variable is unset

    Returns:
        True if the value is one of "true", "1", "yes", "y" or "on"
        (case-insensitive), False otherwise.
    """
    return os.getenv(env_var_name, default).strip().lower() in TRUTHY_VALUES


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting. Anything but an explicit "false" keeps it on."""
    return os.getenv(env_var_name, default).strip().lower() not in (
        "false",
        "0",
        "no",
        "n",
        "off",
    )


def get_float_from_env(env_var_name: str, default: float | None = None) -> float | None:
    """Read a float from the environment, falling back to ``default``.

    Invalid values are logged and ignored.
    """
    raw = os.getenv(env_var_name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            f"Invalid float value for {env_var_name}: {raw}, using default"
        )
        return default


def get_custom_headers(env_var_name: str) -> dict[str, str]:
    """Parse custom headers from an environment variable.

    The expected format is ``Name=value,Other-Name=other value``. Pairs
    without an ``=`` or with an empty name are skipped.

    Args:
        env_var_name: Name of the environment variable holding the headers

    Returns:
        Mapping of header name to value (empty if the variable is unset).
    """
    raw = os.getenv(env_var_name, "").strip()
    if not raw:
        return {}

    headers: dict[str, str] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if "=" not in pair:
            logger.warning(f"Ignoring malformed header in {env_var_name}: {pair}")
            continue
        name, value = pair.split("=", 1)
        name = name.strip()
        if not name:
            logger.warning(f"Ignoring header with empty name in {env_var_name}")
            continue
        headers[name] = value.strip()
    return headers
