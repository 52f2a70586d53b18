"""Client for the COMPASS MCP server recommendation API."""

import logging
import os
from typing import Any
from urllib.parse import quote

from requests import Response, Session
from requests.exceptions import JSONDecodeError, RequestException

from mcp_compass.exceptions import MalformedResponseError, RemoteRequestError
from mcp_compass.utils.logging import get_masked_session_headers, log_config_param

from .config import USER_AGENT, CompassConfig
from .models import ServerDescriptor

logger = logging.getLogger("mcp-compass.client")

# Characters encodeURIComponent leaves unescaped beyond quote's own
URI_COMPONENT_SAFE = "!'()*"


class CompassClient:
    """Client for COMPASS API interactions.

    Holds one requests session configured at construction; each
    ``recommend`` call issues exactly one GET on it.
    """

    config: CompassConfig

    def __init__(self, config: CompassConfig | None = None) -> None:
        """Initialize the COMPASS client.

        Args:
            config: Optional configuration object (will use env vars if not provided)
        """
        self.config = config or CompassConfig.from_env()
        self.session = Session()
        self.session.headers["User-Agent"] = USER_AGENT
        self.session.headers["Accept"] = "application/json"
        self.session.verify = self.config.ssl_verify

        log_config_param(logger, "COMPASS", "URL", self.config.url)
        if not self.config.ssl_verify:
            logger.warning(
                "SSL verification disabled for COMPASS API. "
                "This is insecure and should only be used in testing environments."
            )

        # Proxy configuration
        proxies = {}
        if self.config.http_proxy:
            proxies["http"] = self.config.http_proxy
        if self.config.https_proxy:
            proxies["https"] = self.config.https_proxy
        if self.config.socks_proxy:
            proxies["socks"] = self.config.socks_proxy
        if proxies:
            self.session.proxies.update(proxies)
            for k, v in proxies.items():
                log_config_param(
                    logger, "COMPASS", f"{k.upper()}_PROXY", v, sensitive=True
                )
        if self.config.no_proxy and isinstance(self.config.no_proxy, str):
            os.environ["NO_PROXY"] = self.config.no_proxy
            log_config_param(logger, "COMPASS", "NO_PROXY", self.config.no_proxy)

        if self.config.custom_headers:
            self._apply_custom_headers()

        logger.debug(
            f"COMPASS client initialized. "
            f"Headers: {get_masked_session_headers(dict(self.session.headers))}"
        )

    def __enter__(self) -> "CompassClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def _apply_custom_headers(self) -> None:
        """Apply custom headers to the COMPASS session."""
        header_count = len(self.config.custom_headers)
        logger.debug(f"Applying {header_count} custom headers to COMPASS session")
        for header_name, header_value in self.config.custom_headers.items():
            self.session.headers[header_name] = header_value
            logger.debug(f"Applied custom header: {header_name}")

    def build_recommend_url(self, query: str) -> str:
        """Build the recommendation URL for a query.

        The query is percent-encoded the way a browser's
        ``encodeURIComponent`` does it (spaces as ``%20``, ``&=/?#+`` escaped,
        ``!'()*`` kept) and sent as the ``description`` parameter.

        Args:
            query: Natural-language description of the MCP server needed

        Returns:
            The absolute request URL.
        """
        encoded = quote(query, safe=URI_COMPONENT_SAFE)
        return f"{self.config.recommend_endpoint}?description={encoded}"

    def recommend(self, query: str) -> list[ServerDescriptor]:
        """Ask the COMPASS API for MCP servers matching a query.

        Args:
            query: Natural-language description of the MCP server needed

        Returns:
            Recommended servers in the order the API returned them.

        Raises:
            RemoteRequestError: If the API answers with a non-success status
            MalformedResponseError: If the body is not a JSON array of objects
            requests.exceptions.RequestException: On network failure
        """
        url = self.build_recommend_url(query)
        logger.debug(f"Requesting COMPASS recommendations: {url}")

        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except RequestException as e:
            logger.error(f"Error fetching from COMPASS API: {e}")
            raise

        if not response.ok:
            error = RemoteRequestError(response.status_code)
            logger.error(f"Error fetching from COMPASS API: {error}")
            raise error

        data = self._parse_body(response)
        if data is None:
            return []
        if not isinstance(data, list):
            error = MalformedResponseError(
                f"Expected a JSON array from COMPASS API, got {type(data).__name__}"
            )
            logger.error(f"Error fetching from COMPASS API: {error}")
            raise error

        servers = [ServerDescriptor.from_api_response(item) for item in data]
        logger.info(f"COMPASS API returned {len(servers)} server(s)")
        return servers

    def _parse_body(self, response: Response) -> Any:
        """Decode the JSON body of a successful response."""
        try:
            return response.json()
        except JSONDecodeError as e:
            logger.error(f"Error fetching from COMPASS API: invalid JSON body: {e}")
            raise MalformedResponseError(
                f"COMPASS API returned invalid JSON: {e}"
            ) from e
