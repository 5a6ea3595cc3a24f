from mcp.server.fastmcp import Context, FastMCP
from pydantic import BaseModel, Field
from typing import List, Optional

from clickup_mcp.config import Settings
from clickup_mcp.client import ClickUpClient, query_flag
from clickup_mcp.credentials import require_credentials

# ============================================================================
# Input Models (Request Parameters)
# ============================================================================

PRIORITY_DESCRIPTION = "Task priority (1: Urgent, 2: High, 3: Normal, 4: Low)"


class GetTaskIn(BaseModel):
    """Input parameters for fetching a single task"""

    task_id: str = Field(..., description="Task ID", min_length=1)
    custom_task_ids: Optional[bool] = Field(
        None,
        description="If you want to reference a task by its custom task id, "
        "this value must be true",
    )
    include_subtasks: Optional[bool] = Field(
        None, description="Include subtasks, default false"
    )


class AssigneesChange(BaseModel):
    """Users to add to and remove from a task"""

    add: Optional[List[int]] = Field(None, description="User IDs to assign")
    rem: Optional[List[int]] = Field(None, description="User IDs to unassign")


class UpdateTaskIn(BaseModel):
    """Input parameters for updating a task; only supplied fields are sent"""

    task_id: str = Field(..., description="Task ID", min_length=1)
    name: Optional[str] = Field(None, description="Task name")
    description: Optional[str] = Field(None, description="Task description")
    status: Optional[str] = Field(None, description="Task status")
    priority: Optional[int] = Field(None, description=PRIORITY_DESCRIPTION, ge=1, le=4)
    due_date: Optional[int] = Field(
        None, description="Due date in Unix time milliseconds"
    )
    assignees: Optional[AssigneesChange] = Field(
        None, description="Object with 'add' and 'rem' arrays of user IDs"
    )


class CreateTaskIn(BaseModel):
    """Input parameters for creating a task in a list"""

    list_id: str = Field(..., description="List ID", min_length=1)
    name: str = Field(..., description="Task name", min_length=1)
    description: Optional[str] = Field(None, description="Task description")
    status: Optional[str] = Field(None, description="Task status")
    priority: Optional[int] = Field(None, description=PRIORITY_DESCRIPTION, ge=1, le=4)
    assignees: Optional[List[int]] = Field(
        None, description="Array of user IDs to assign"
    )
    tags: Optional[List[str]] = Field(None, description="Array of tag names")


class GetWorkspaceTasksIn(BaseModel):
    """Input parameters for filtering the tasks of the workspace"""

    page: Optional[int] = Field(None, description="Page to fetch (starts at 0)", ge=0)
    order_by: Optional[str] = Field(
        None, description="Order by field (e.g., 'created', 'updated', 'due_date')"
    )
    statuses: Optional[List[str]] = Field(None, description="Filter by statuses")
    include_closed: Optional[bool] = Field(
        None, description="Include or exclude closed tasks"
    )
    assignees: Optional[List[int]] = Field(
        None, description="Filter by assignee user IDs"
    )


# ============================================================================
# Tool Registration
# ============================================================================


def register(server: FastMCP, settings: Settings | None = None):
    """Register all task tools with the MCP server"""
    settings = settings or Settings()

    @server.tool("get_task", description="Get a specific task by ID")
    async def get_task(params: GetTaskIn, ctx: Context) -> dict:
        """
        Retrieve a task by its ClickUp ID or custom task ID.

        Args:
            params: Validated input with task_id and optional lookup flags

        Returns:
            dict: Full task object from ClickUp

        Note:
            Custom task IDs are only unique within a workspace, so the
            workspace ID is sent as ``team_id`` whenever custom_task_ids is true.
        """
        creds = require_credentials(ctx, settings)
        client = ClickUpClient(settings, creds)

        query = {}
        if params.custom_task_ids is not None:
            query["custom_task_ids"] = query_flag(params.custom_task_ids)
        if params.include_subtasks is not None:
            query["include_subtasks"] = query_flag(params.include_subtasks)
        if params.custom_task_ids:
            query["team_id"] = creds.workspace_id

        res = await client.get(f"/task/{params.task_id}", params=query)
        return res.json()

    @server.tool("update_task", description="Update a task")
    async def update_task(params: UpdateTaskIn, ctx: Context) -> dict:
        """
        Update a task with whichever fields were supplied.

        Args:
            params: Validated input with task_id and the fields to change

        Returns:
            dict: Updated task object

        Note:
            The request body holds exactly the supplied fields; omitted fields
            are left untouched on the ClickUp side.
        """
        client = ClickUpClient(settings, require_credentials(ctx, settings))
        body = params.model_dump(exclude={"task_id"}, exclude_none=True)
        res = await client.put(f"/task/{params.task_id}", json=body)
        return res.json()

    @server.tool("create_task", description="Create a new task in a list")
    async def create_task(params: CreateTaskIn, ctx: Context) -> dict:
        """
        Create a task in a list.

        Args:
            params: Validated input with list_id, name, and optional fields

        Returns:
            dict: Created task object
        """
        client = ClickUpClient(settings, require_credentials(ctx, settings))
        body = params.model_dump(exclude={"list_id"}, exclude_none=True)
        res = await client.post(f"/list/{params.list_id}/task", json=body)
        return res.json()

    @server.tool(
        "get_workspace_tasks", description="Get filtered tasks from a workspace"
    )
    async def get_workspace_tasks(params: GetWorkspaceTasksIn, ctx: Context) -> dict:
        """
        Search tasks across the whole workspace.

        Array filters are sent as repeated ``statuses[]`` / ``assignees[]``
        query parameters, which is how ClickUp reads them.
        """
        creds = require_credentials(ctx, settings)
        client = ClickUpClient(settings, creds)

        query = []
        if params.page is not None:
            query.append(("page", str(params.page)))
        if params.order_by is not None:
            query.append(("order_by", params.order_by))
        if params.include_closed is not None:
            query.append(("include_closed", query_flag(params.include_closed)))
        for status in params.statuses or []:
            query.append(("statuses[]", status))
        for assignee in params.assignees or []:
            query.append(("assignees[]", str(assignee)))

        res = await client.get(f"/team/{creds.workspace_id}/task", params=query)
        return res.json()
