"""MCP server exposing COMPASS recommendations as a tool."""

import logging
from threading import Lock
from typing import Annotated

import anyio.to_thread
from fastmcp import FastMCP
from pydantic import Field

from mcp_compass.compass import CompassClient, format_servers
from mcp_compass.compass.config import SERVER_NAME, SERVER_VERSION
from mcp_compass.compass.formatting import NO_RESULTS_MESSAGE

logger = logging.getLogger("mcp-compass.server")

RECOMMEND_TOOL_NAME = "recommend-mcp-servers"

RECOMMEND_TOOL_DESCRIPTION = """
Use this tool when there is a need to find external MCP tools.
It explores and recommends existing MCP servers from the
internet, based on the description of the MCP Server
needed. It returns a list of MCP servers with their IDs,
descriptions, GitHub URLs, and similarity scores.
"""

QUERY_DESCRIPTION = """
Description for the MCP Server needed.
It should be specific and actionable, e.g.:
GOOD:
- 'MCP Server for AWS Lambda Python3.9 deployment'
- 'MCP Server for United Airlines booking API'
- 'MCP Server for Stripe refund webhook handling'

BAD:
- 'MCP Server for cloud' (too vague)
- 'MCP Server for booking' (which booking system?)
- 'MCP Server for payment' (which payment provider?)

Query should explicitly specify:
1. Target platform/vendor (e.g. AWS, Stripe, MongoDB)
2. Exact operation/service (e.g. Lambda deployment, webhook handling)
3. Additional context if applicable (e.g. Python, refund events)
"""

compass_mcp = FastMCP(
    name=SERVER_NAME,
    version=SERVER_VERSION,
    instructions=(
        "Recommends existing MCP servers for a described capability "
        "using the COMPASS registry."
    ),
)

_client: CompassClient | None = None
_client_lock = Lock()


def get_compass_client() -> CompassClient:
    """Return the process-wide COMPASS client, creating it on first use.

    Concurrent first calls share one instance.
    """
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                _client = CompassClient()
    return _client


@compass_mcp.tool(
    name=RECOMMEND_TOOL_NAME,
    description=RECOMMEND_TOOL_DESCRIPTION,
    tags={"compass", "discovery", "read"},
)
async def recommend_mcp_servers(
    query: Annotated[str, Field(description=QUERY_DESCRIPTION, min_length=1)],
) -> str:
    """Recommend MCP servers matching a capability description.

    Args:
        query: Natural-language description of the MCP server needed

    Returns:
        Rendered list of recommended servers, or an advisory message when
        nothing matched.
    """
    client = get_compass_client()
    logger.debug(f"{RECOMMEND_TOOL_NAME} called with query: {query!r}")

    servers = await anyio.to_thread.run_sync(client.recommend, query)

    if not servers:
        logger.info(f"No MCP servers found for query: {query!r}")
        return NO_RESULTS_MESSAGE

    return format_servers(servers)
