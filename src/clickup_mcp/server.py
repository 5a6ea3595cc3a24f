from mcp.server.fastmcp import FastMCP

from clickup_mcp.config import Settings
from clickup_mcp.tools import (
    spaces,
    tasks,
    tags,
    attachments,
    folders,
    lists,
    hierarchy,
)


def build_server(settings: Settings | None = None) -> FastMCP:
    settings = settings or Settings()
    server = FastMCP(
        "clickup",
        instructions=(
            "Read and manage ClickUp spaces, folders, lists and tasks. "
            "Use get_workspace_hierarchy first to discover IDs."
        ),
        host=settings.host,
        port=settings.port,
    )

    spaces.register(server, settings)
    tasks.register(server, settings)
    tags.register(server, settings)
    attachments.register(server, settings)
    folders.register(server, settings)
    lists.register(server, settings)
    hierarchy.register(server, settings)
    return server
