"""Configuration for the COMPASS API client."""

import os
from dataclasses import dataclass, field

from mcp_compass.utils.env import (
    get_custom_headers,
    get_float_from_env,
    is_env_ssl_verify,
)

SERVER_NAME = "mcp-compass"
SERVER_VERSION = "1.0.0"
USER_AGENT = f"{SERVER_NAME}/{SERVER_VERSION}"

COMPASS_API_BASE = "https://registry.mcphub.io"


@dataclass
class CompassConfig:
    """COMPASS API client configuration.

    The API origin is fixed; only transport details (TLS, proxies,
    headers, timeout) come from the environment.
    """

    url: str = COMPASS_API_BASE
    ssl_verify: bool = True
    timeout: float | None = None
    http_proxy: str | None = None
    https_proxy: str | None = None
    socks_proxy: str | None = None
    no_proxy: str | None = None
    custom_headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "CompassConfig":
        """Create configuration from environment variables.

        Environment Variables:
            COMPASS_SSL_VERIFY: Verify TLS certificates (default true)
            COMPASS_TIMEOUT: Request timeout in seconds (default: none)
            COMPASS_HTTP_PROXY / HTTP_PROXY: HTTP proxy URL
            COMPASS_HTTPS_PROXY / HTTPS_PROXY: HTTPS proxy URL
            COMPASS_SOCKS_PROXY / SOCKS_PROXY: SOCKS proxy URL
            COMPASS_NO_PROXY / NO_PROXY: Hosts that bypass the proxy
            COMPASS_CUSTOM_HEADERS: Extra headers, ``Name=value,Name2=value2``

        Returns:
            CompassConfig with values from the environment
        """
        return cls(
            ssl_verify=is_env_ssl_verify("COMPASS_SSL_VERIFY"),
            timeout=get_float_from_env("COMPASS_TIMEOUT"),
            http_proxy=os.getenv("COMPASS_HTTP_PROXY", os.getenv("HTTP_PROXY")),
            https_proxy=os.getenv("COMPASS_HTTPS_PROXY", os.getenv("HTTPS_PROXY")),
            socks_proxy=os.getenv("COMPASS_SOCKS_PROXY", os.getenv("SOCKS_PROXY")),
            no_proxy=os.getenv("COMPASS_NO_PROXY", os.getenv("NO_PROXY")),
            custom_headers=get_custom_headers("COMPASS_CUSTOM_HEADERS"),
        )

    @property
    def recommend_endpoint(self) -> str:
        """Full URL of the recommendation endpoint, without the query string."""
        return f"{self.url.rstrip('/')}/recommend"
