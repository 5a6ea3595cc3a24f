from mcp.server.fastmcp import Context, FastMCP
from pydantic import BaseModel, Field
from typing import Optional
import json

from clickup_mcp.config import Settings
from clickup_mcp.client import ClickUpClient, query_flag
from clickup_mcp.credentials import require_credentials
from clickup_mcp.models import Space

# ============================================================================
# Input Models (Request Parameters)
# ============================================================================


class GetSpacesIn(BaseModel):
    """Input parameters for listing the spaces of the workspace"""

    archived: Optional[bool] = Field(None, description="Filter for archived spaces")


# ============================================================================
# Tool Registration
# ============================================================================


def register(server: FastMCP, settings: Settings | None = None):
    """Register all space tools with the MCP server"""
    settings = settings or Settings()

    @server.tool(
        "get_spaces",
        description="Get all spaces in a workspace. View the Spaces available in "
        "a Workspace. You can only get member info in private Spaces.",
    )
    async def get_spaces(params: GetSpacesIn, ctx: Context) -> str:
        """
        List the spaces of the caller's workspace.

        Args:
            params: Validated input with the optional archived filter

        Returns:
            str: JSON array of {id, name} pairs, in the order ClickUp returns them

        Note:
            - The workspace comes from the resolved credentials, never from params
            - ``archived`` is only forwarded when supplied
        """
        creds = require_credentials(ctx, settings)
        client = ClickUpClient(settings, creds)

        query = {}
        if params.archived is not None:
            query["archived"] = query_flag(params.archived)

        res = await client.get(f"/team/{creds.workspace_id}/space", params=query)
        spaces = [
            Space.model_validate(raw).model_dump()
            for raw in res.json().get("spaces") or []
        ]
        return json.dumps(spaces, indent=2)
