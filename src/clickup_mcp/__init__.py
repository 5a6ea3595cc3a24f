"""
ClickUp MCP Server

A Model Context Protocol (MCP) server for ClickUp integration.
Provides tools for spaces, folders, lists, tasks, tags, attachments,
and a rendered view of the workspace hierarchy.
"""

from clickup_mcp.config import Settings
from clickup_mcp.client import ClickUpClient
from clickup_mcp.server import build_server

__version__ = "0.1.0"
__all__ = [
    "Settings",
    "ClickUpClient",
    "build_server",
]
