"""
Workspace hierarchy tool.

Walks Workspace → Spaces → Folders → Lists with one round of concurrent
fetches per level and renders the result as a box-drawing tree:

    Workspace (Team ID: 123)
    ├── Space: Engineering (ID: 1)
    │   ├── Folder: Backend (ID: 10)
    │   │   └── List: API (ID: 100)
    │   └── List (Folderless): Inbox (ID: 101)
    └── Space: Marketing (ID: 2)

The spaces fetch must succeed. Below it, a failed folder or list fetch
renders that branch empty unless ``Settings.hierarchy_strict`` is set.
"""

import logging
from typing import Dict, List, Optional

import httpx
from mcp.server.fastmcp import Context, FastMCP
from pydantic import BaseModel, Field

from clickup_mcp.config import Settings
from clickup_mcp.client import ClickUpClient
from clickup_mcp.credentials import require_credentials
from clickup_mcp.errors import ClickUpError
from clickup_mcp.models import ClickUpList, Folder, Space
from clickup_mcp.utils.fetch import FetchResult, fetch_collection, gather_or_cancel
from clickup_mcp.utils.tree import TreeNode, format_tree

log = logging.getLogger(__name__)

# ============================================================================
# Input Models (Request Parameters)
# ============================================================================


class GetWorkspaceHierarchyIn(BaseModel):
    """Input parameters for rendering the workspace hierarchy"""

    include_archived: Optional[bool] = Field(
        None, description="Include archived items in the hierarchy"
    )


# ============================================================================
# Assembly
# ============================================================================


class HierarchyBuilder:
    """Fetches one workspace's containers and arranges them into a TreeNode."""

    def __init__(
        self, client: ClickUpClient, include_archived: bool = False, strict: bool = False
    ):
        self.client = client
        self.strict = strict
        self.params: Optional[Dict[str, str]] = (
            {"archived": "true"} if include_archived else None
        )

    def _settle(self, result: FetchResult, what: str) -> list:
        if self.strict:
            return result.unwrap()
        if not result.ok:
            log.warning("Rendering %s as empty: %s", what, result.error)
        return result.items_or_empty()

    async def build(self) -> TreeNode:
        workspace_id = self.client.workspace_id
        spaces = (
            await fetch_collection(
                self.client, f"/team/{workspace_id}/space", "spaces", Space, self.params
            )
        ).unwrap()

        nodes = await gather_or_cancel(*(self._space_node(s) for s in spaces))
        return TreeNode(f"Workspace (Team ID: {workspace_id})", list(nodes))

    async def _space_node(self, space: Space) -> TreeNode:
        folders_res, lists_res = await gather_or_cancel(
            fetch_collection(
                self.client, f"/space/{space.id}/folder", "folders", Folder, self.params
            ),
            fetch_collection(
                self.client, f"/space/{space.id}/list", "lists", ClickUpList, self.params
            ),
        )
        folders = self._settle(folders_res, f"folders of space {space.id}")
        folderless = self._settle(lists_res, f"folderless lists of space {space.id}")

        children: List[TreeNode] = list(
            await gather_or_cancel(*(self._folder_node(f) for f in folders))
        )
        children.extend(
            TreeNode(f"List (Folderless): {lst.name} (ID: {lst.id})")
            for lst in folderless
        )
        return TreeNode(f"Space: {space.name} (ID: {space.id})", children)

    async def _folder_node(self, folder: Folder) -> TreeNode:
        result = await fetch_collection(
            self.client, f"/folder/{folder.id}/list", "lists", ClickUpList, self.params
        )
        lists = self._settle(result, f"lists of folder {folder.id}")
        return TreeNode(
            f"Folder: {folder.name} (ID: {folder.id})",
            [TreeNode(f"List: {lst.name} (ID: {lst.id})") for lst in lists],
        )


# ============================================================================
# Tool Registration
# ============================================================================


def register(server: FastMCP, settings: Settings | None = None):
    """Register the hierarchy tool with the MCP server"""
    settings = settings or Settings()

    @server.tool(
        "get_workspace_hierarchy",
        description="Get the complete hierarchy of a workspace in a tree format "
        "(Workspace → Spaces → Folders → Lists). This provides a visual "
        "representation of the entire workspace structure.",
    )
    async def get_workspace_hierarchy(
        params: GetWorkspaceHierarchyIn, ctx: Context
    ) -> str:
        client = ClickUpClient(settings, require_credentials(ctx, settings))
        builder = HierarchyBuilder(
            client,
            include_archived=bool(params.include_archived),
            strict=settings.hierarchy_strict,
        )
        try:
            root = await builder.build()
        except (ClickUpError, httpx.HTTPError) as e:
            raise ClickUpError(f"Failed to build hierarchy: {e}") from e
        return format_tree(root)
