"""
Per-call credential resolution.

Every tool call resolves its ClickUp API key and workspace (team) ID from,
in priority order: a request header, a request query parameter, and finally
the process-level settings loaded from the environment.
"""

from typing import Mapping, Optional

from mcp.server.fastmcp import Context
from pydantic import BaseModel

from clickup_mcp.config import Settings
from clickup_mcp.errors import MissingCredentials

API_KEY_HEADER = "x-api-key"
TEAM_ID_HEADER = "x-team-id"
API_KEY_QUERY = "apiKey"
TEAM_ID_QUERY = "teamId"


class Credentials(BaseModel):
    api_key: str
    workspace_id: str


def _first(*candidates: Optional[str]) -> Optional[str]:
    for value in candidates:
        if value:
            return value
    return None


def resolve_credentials(
    headers: Mapping[str, str],
    query: Mapping[str, str],
    fallback: Settings,
) -> Optional[Credentials]:
    """Pick each credential from header, then query, then settings.

    Returns None unless both the API key and the workspace ID are non-empty.
    """
    api_key = _first(
        headers.get(API_KEY_HEADER), query.get(API_KEY_QUERY), fallback.api_key
    )
    workspace_id = _first(
        headers.get(TEAM_ID_HEADER), query.get(TEAM_ID_QUERY), fallback.team_id
    )
    if not api_key or not workspace_id:
        return None
    return Credentials(api_key=api_key, workspace_id=workspace_id)


def _current_request(ctx: Optional[Context]):
    if ctx is None:
        return None
    try:
        return ctx.request_context.request
    except ValueError:
        # Tool invoked outside an MCP request (direct call_tool)
        return None


def require_credentials(ctx: Optional[Context], settings: Settings) -> Credentials:
    """Resolve credentials for the current call or raise MissingCredentials."""
    request = _current_request(ctx)
    headers = getattr(request, "headers", None) or {}
    query = getattr(request, "query_params", None) or {}

    creds = resolve_credentials(headers, query, settings)
    if creds is None:
        raise MissingCredentials(
            "ClickUp API key and team ID are required: send x-api-key/x-team-id "
            "headers, apiKey/teamId query parameters, or set CLICKUP_API_KEY "
            "and CLICKUP_TEAM_ID"
        )
    return creds
