from mcp.server.fastmcp import Context, FastMCP
from pydantic import AnyHttpUrl, BaseModel, Field
from typing import Optional
from urllib.parse import urlparse
import httpx
import mimetypes

from clickup_mcp.config import Settings
from clickup_mcp.client import ClickUpClient, download
from clickup_mcp.credentials import require_credentials
from clickup_mcp.errors import ClickUpError

# ============================================================================
# Input Models (Request Parameters)
# ============================================================================


class AttachFileToTaskIn(BaseModel):
    """Input parameters for attaching a remote file to a task"""

    task_id: str = Field(..., description="Task ID", min_length=1)
    file_url: AnyHttpUrl = Field(..., description="URL of the file to attach")
    filename: Optional[str] = Field(
        None,
        description="Optional custom filename. If not provided, will be "
        "extracted from URL",
    )


def filename_from_url(url: str) -> str:
    """Last path segment of ``url``, or ``attachment`` when there is none."""
    return urlparse(url).path.split("/")[-1] or "attachment"


# ============================================================================
# Tool Registration
# ============================================================================


def register(server: FastMCP, settings: Settings | None = None):
    """Register all attachment tools with the MCP server"""
    settings = settings or Settings()

    @server.tool(
        "attach_file_to_task",
        description="Attach a file to a task by providing a URL. The file will "
        "be downloaded and uploaded to ClickUp.",
    )
    async def attach_file_to_task(params: AttachFileToTaskIn, ctx: Context) -> dict:
        """
        Download a file from a URL and upload it as a task attachment.

        Args:
            params: Validated input with task_id, file_url, and optional filename

        Returns:
            dict: Attachment metadata from the ClickUp API response

        Raises:
            ClickUpError: "Failed to attach file: ..." when the download or
                the upload fails
        """
        client = ClickUpClient(settings, require_credentials(ctx, settings))
        file_url = str(params.file_url)

        try:
            file_res = await download(settings, file_url)
            if not file_res.is_success:
                raise ClickUpError(
                    f"Failed to fetch file from URL: {file_res.status_code} - "
                    f"{file_res.reason_phrase}"
                )

            filename = params.filename or filename_from_url(file_url)
            content_type = (
                file_res.headers.get("content-type")
                or mimetypes.guess_type(filename)[0]
                or "application/octet-stream"
            )

            res = await client.post(
                f"/task/{params.task_id}/attachment",
                files={"attachment": (filename, file_res.content, content_type)},
            )
            return res.json()

        except (ClickUpError, httpx.HTTPError) as e:
            raise ClickUpError(f"Failed to attach file: {e}") from e
