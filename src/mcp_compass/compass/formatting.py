"""Text rendering of COMPASS recommendations."""

from collections.abc import Sequence

from .models import ServerDescriptor

NO_RESULTS_MESSAGE = (
    "No matching MCP servers found for your query. "
    "Try being more specific about the platform, operation, or service you need."
)


def format_server(index: int, server: ServerDescriptor) -> str:
    """Render one server as a five-line block ending in a newline.

    Args:
        index: 1-based position of the server in the result list
        server: The server to render

    Returns:
        The rendered block.
    """
    return "\n".join(
        [
            f"Server {index}:",
            f"Title: {server.title}",
            f"Description: {server.description}",
            f"GitHub URL: {server.github_url}",
            f"Similarity: {server.similarity_percentage}",
            "",
        ]
    )


def format_servers(servers: Sequence[ServerDescriptor]) -> str:
    """Render servers in order, separated by blank lines.

    Returns NO_RESULTS_MESSAGE when there is nothing to render.
    """
    if not servers:
        return NO_RESULTS_MESSAGE

    return "\n".join(
        format_server(index, server) for index, server in enumerate(servers, start=1)
    )
