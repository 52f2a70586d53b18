"""FastMCP servers for MCP Compass."""

from .main import compass_mcp

__all__ = ["compass_mcp"]
