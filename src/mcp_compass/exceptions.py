"""Exceptions raised by MCP Compass."""


class MCPCompassError(Exception):
    """Base exception for all MCP Compass errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class RemoteRequestError(MCPCompassError):
    """Raised when the COMPASS API answers with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(
            message or f"COMPASS API request failed with status {status_code}"
        )


class MalformedResponseError(MCPCompassError, ValueError):
    """Raised when the COMPASS API body cannot be read as a server list."""
