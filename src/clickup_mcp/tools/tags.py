from mcp.server.fastmcp import Context, FastMCP
from pydantic import BaseModel, Field
from urllib.parse import quote

from clickup_mcp.config import Settings
from clickup_mcp.client import ClickUpClient
from clickup_mcp.credentials import require_credentials

# ============================================================================
# Input Models (Request Parameters)
# ============================================================================


class TagTaskIn(BaseModel):
    """Input parameters for adding or removing a task tag"""

    task_id: str = Field(..., description="Task ID", min_length=1)
    tag_name: str = Field(..., description="Tag name", min_length=1)


def _tag_path(params: TagTaskIn) -> str:
    return f"/task/{params.task_id}/tag/{quote(params.tag_name, safe='')}"


# ============================================================================
# Tool Registration
# ============================================================================


def register(server: FastMCP, settings: Settings | None = None):
    """Register all tag tools with the MCP server"""
    settings = settings or Settings()

    @server.tool("add_tag_to_task", description="Add a tag to a task")
    async def add_tag_to_task(params: TagTaskIn, ctx: Context) -> dict:
        """
        Add an existing space tag to a task.

        Args:
            params: Validated input with task_id and tag_name

        Returns:
            dict: ClickUp response body (usually empty)
        """
        client = ClickUpClient(settings, require_credentials(ctx, settings))
        res = await client.post(_tag_path(params))
        return res.json() if res.content else {}

    @server.tool("remove_tag_from_task", description="Remove a tag from a task")
    async def remove_tag_from_task(params: TagTaskIn, ctx: Context) -> dict:
        client = ClickUpClient(settings, require_credentials(ctx, settings))
        await client.delete(_tag_path(params))
        return {"success": True}
