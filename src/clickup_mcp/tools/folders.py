from mcp.server.fastmcp import Context, FastMCP
from pydantic import BaseModel, Field
from typing import Optional

from clickup_mcp.config import Settings
from clickup_mcp.client import ClickUpClient, query_flag
from clickup_mcp.credentials import require_credentials

# ============================================================================
# Input Models (Request Parameters)
# ============================================================================


class GetFoldersIn(BaseModel):
    """Input parameters for listing the folders of a space"""

    space_id: str = Field(..., description="Space ID", min_length=1)
    archived: Optional[bool] = Field(None, description="Filter for archived folders")


class GetFolderIn(BaseModel):
    """Input parameters for fetching a single folder"""

    folder_id: str = Field(..., description="Folder ID", min_length=1)


# ============================================================================
# Tool Registration
# ============================================================================


def register(server: FastMCP, settings: Settings | None = None):
    """Register all folder tools with the MCP server"""
    settings = settings or Settings()

    @server.tool("get_folders", description="Get all folders in a space")
    async def get_folders(params: GetFoldersIn, ctx: Context) -> dict:
        """
        Retrieve the folders of a space.

        Args:
            params: Validated input with space_id and optional archived filter

        Returns:
            dict: ClickUp response ({"folders": [...]}), each folder with its lists
        """
        client = ClickUpClient(settings, require_credentials(ctx, settings))
        query = {}
        if params.archived is not None:
            query["archived"] = query_flag(params.archived)
        res = await client.get(f"/space/{params.space_id}/folder", params=query)
        return res.json()

    @server.tool("get_folder", description="Get a specific folder by ID")
    async def get_folder(params: GetFolderIn, ctx: Context) -> dict:
        client = ClickUpClient(settings, require_credentials(ctx, settings))
        res = await client.get(f"/folder/{params.folder_id}")
        return res.json()
