from mcp.server.fastmcp import Context, FastMCP
from pydantic import BaseModel, Field
from typing import Optional

from clickup_mcp.config import Settings
from clickup_mcp.client import ClickUpClient, query_flag
from clickup_mcp.credentials import require_credentials

# ============================================================================
# Input Models (Request Parameters)
# ============================================================================


class GetListsIn(BaseModel):
    """Input parameters for listing the lists of a folder"""

    folder_id: str = Field(..., description="Folder ID", min_length=1)
    archived: Optional[bool] = Field(None, description="Filter for archived lists")


class GetFolderlessListsIn(BaseModel):
    """Input parameters for listing the lists that sit directly in a space"""

    space_id: str = Field(..., description="Space ID", min_length=1)
    archived: Optional[bool] = Field(None, description="Filter for archived lists")


class GetListIn(BaseModel):
    """Input parameters for fetching a single list"""

    list_id: str = Field(..., description="List ID", min_length=1)


def _archived_query(archived: Optional[bool]) -> dict:
    return {} if archived is None else {"archived": query_flag(archived)}


# ============================================================================
# Tool Registration
# ============================================================================


def register(server: FastMCP, settings: Settings | None = None):
    """Register all list tools with the MCP server"""
    settings = settings or Settings()

    @server.tool("get_lists", description="Get all lists in a folder")
    async def get_lists(params: GetListsIn, ctx: Context) -> dict:
        """
        Retrieve the lists inside a folder.

        Args:
            params: Validated input with folder_id and optional archived filter

        Returns:
            dict: ClickUp response ({"lists": [...]})
        """
        client = ClickUpClient(settings, require_credentials(ctx, settings))
        res = await client.get(
            f"/folder/{params.folder_id}/list", params=_archived_query(params.archived)
        )
        return res.json()

    @server.tool(
        "get_folderless_lists",
        description="Get all lists without a folder (folderless lists) in a space",
    )
    async def get_folderless_lists(params: GetFolderlessListsIn, ctx: Context) -> dict:
        """
        Retrieve the lists attached directly to a space, bypassing any folder.

        Args:
            params: Validated input with space_id and optional archived filter

        Returns:
            dict: ClickUp response ({"lists": [...]})
        """
        client = ClickUpClient(settings, require_credentials(ctx, settings))
        res = await client.get(
            f"/space/{params.space_id}/list", params=_archived_query(params.archived)
        )
        return res.json()

    @server.tool("get_list", description="Get a specific list by ID")
    async def get_list(params: GetListIn, ctx: Context) -> dict:
        client = ClickUpClient(settings, require_credentials(ctx, settings))
        res = await client.get(f"/list/{params.list_id}")
        return res.json()
