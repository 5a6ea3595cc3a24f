from typing import Literal, Optional

from pydantic import Field, AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """ClickUp MCP Server configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLICKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Last-resort credentials; request headers and query parameters win
    api_key: Optional[str] = Field(
        default=None, description="ClickUp personal API token (CLICKUP_API_KEY)"
    )
    team_id: Optional[str] = Field(
        default=None, description="ClickUp workspace/team ID (CLICKUP_TEAM_ID)"
    )

    base_url: AnyHttpUrl = Field(
        default="https://api.clickup.com/api/v2",
        description="ClickUp REST API base URL",
    )
    connect_timeout: float = Field(
        default=10.0, description="Connection timeout in seconds"
    )
    read_timeout: float = Field(default=30.0, description="Read timeout in seconds")

    hierarchy_strict: bool = Field(
        default=False,
        description="Fail the hierarchy when a folder or list fetch fails "
        "instead of rendering that branch empty",
    )

    transport: Literal["stdio", "sse", "streamable-http"] = Field(
        default="stdio", alias="CLICKUP_MCP_TRANSPORT"
    )
    host: str = Field(default="127.0.0.1", alias="CLICKUP_MCP_HOST")
    port: int = Field(default=8000, alias="CLICKUP_MCP_PORT", ge=1, le=65535)
