"""
Unit tests for the workspace hierarchy tool.

Covers tree rendering, remote ordering, the degrade-to-empty policy for
folder and list fetches, and the fatal policy for the spaces fetch.
"""

import pytest
import respx
import httpx
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from clickup_mcp.config import Settings
from clickup_mcp.tools import hierarchy

from tests.helpers.assertions import assert_not_requested, tool_text
from tests.helpers.mocks import mock_folder, mock_list, mock_space


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def server(mock_settings):
    """FastMCP server with the hierarchy tool registered."""
    server = FastMCP("test-clickup")
    hierarchy.register(server, mock_settings)
    return server


@pytest.fixture
def strict_server():
    server = FastMCP("test-clickup")
    hierarchy.register(
        server, Settings(api_key="pk_key", team_id="9001", hierarchy_strict=True)
    )
    return server


def ok(key, items):
    return httpx.Response(200, json={key: items})


def mock_two_space_workspace(router, base_url):
    """Alpha holds one folder with one list; Beta holds one folderless list."""
    return {
        "spaces": router.get(f"{base_url}/team/9001/space").mock(
            return_value=ok(
                "spaces", [mock_space("1", "Alpha"), mock_space("2", "Beta")]
            )
        ),
        "alpha_folders": router.get(f"{base_url}/space/1/folder").mock(
            return_value=ok("folders", [mock_folder("10", "Backend")])
        ),
        "alpha_lists": router.get(f"{base_url}/space/1/list").mock(
            return_value=ok("lists", [])
        ),
        "backend_lists": router.get(f"{base_url}/folder/10/list").mock(
            return_value=ok("lists", [mock_list("100", "API")])
        ),
        "beta_folders": router.get(f"{base_url}/space/2/folder").mock(
            return_value=ok("folders", [])
        ),
        "beta_lists": router.get(f"{base_url}/space/2/list").mock(
            return_value=ok("lists", [mock_list("200", "Inbox")])
        ),
    }


async def call_hierarchy(server, **params):
    result = await server.call_tool("get_workspace_hierarchy", {"params": params})
    return tool_text(result)


# ============================================================================
# Test: rendering
# ============================================================================


class TestHierarchyRendering:
    """Test suite for the rendered tree."""

    @respx.mock
    @pytest.mark.asyncio
    async def test_two_space_tree(self, server, base_url):
        mock_two_space_workspace(respx, base_url)

        text = await call_hierarchy(server)

        assert text.split("\n") == [
            "Workspace (Team ID: 9001)",
            "├── Space: Alpha (ID: 1)",
            "│   └── Folder: Backend (ID: 10)",
            "│       └── List: API (ID: 100)",
            "└── Space: Beta (ID: 2)",
            "    └── List (Folderless): Inbox (ID: 200)",
        ]

    @respx.mock
    @pytest.mark.asyncio
    async def test_folders_and_folderless_lists_share_a_level(self, server, base_url):
        respx.get(f"{base_url}/team/9001/space").mock(
            return_value=ok("spaces", [mock_space("1", "Alpha")])
        )
        respx.get(f"{base_url}/space/1/folder").mock(
            return_value=ok(
                "folders", [mock_folder("10", "Backend"), mock_folder("11", "Web")]
            )
        )
        respx.get(f"{base_url}/space/1/list").mock(
            return_value=ok("lists", [mock_list("300", "Inbox")])
        )
        respx.get(f"{base_url}/folder/10/list").mock(
            return_value=ok("lists", [mock_list("100", "API"), mock_list("101", "DB")])
        )
        respx.get(f"{base_url}/folder/11/list").mock(return_value=ok("lists", []))

        text = await call_hierarchy(server)

        assert text.split("\n") == [
            "Workspace (Team ID: 9001)",
            "└── Space: Alpha (ID: 1)",
            "    ├── Folder: Backend (ID: 10)",
            "    │   ├── List: API (ID: 100)",
            "    │   └── List: DB (ID: 101)",
            "    ├── Folder: Web (ID: 11)",
            "    └── List (Folderless): Inbox (ID: 300)",
        ]

    @respx.mock
    @pytest.mark.asyncio
    async def test_remote_order_is_kept(self, server, base_url):
        respx.get(f"{base_url}/team/9001/space").mock(
            return_value=ok(
                "spaces", [mock_space("9", "Zulu"), mock_space("3", "Alpha")]
            )
        )
        respx.get(url__regex=rf"{base_url}/space/\d+/(folder|list)").mock(
            return_value=httpx.Response(200, json={})
        )

        text = await call_hierarchy(server)

        assert text.split("\n")[1:] == [
            "├── Space: Zulu (ID: 9)",
            "└── Space: Alpha (ID: 3)",
        ]

    @respx.mock
    @pytest.mark.asyncio
    async def test_empty_workspace(self, server, base_url):
        respx.get(f"{base_url}/team/9001/space").mock(return_value=ok("spaces", []))

        assert await call_hierarchy(server) == "Workspace (Team ID: 9001)"

    @respx.mock
    @pytest.mark.asyncio
    async def test_include_archived_forwarded_everywhere(self, server, base_url):
        routes = mock_two_space_workspace(respx, base_url)

        await call_hierarchy(server, include_archived=True)

        for route in routes.values():
            assert route.calls.last.request.url.params["archived"] == "true"

    @respx.mock
    @pytest.mark.asyncio
    async def test_archived_not_sent_by_default(self, server, base_url):
        routes = mock_two_space_workspace(respx, base_url)

        await call_hierarchy(server)

        for route in routes.values():
            assert "archived" not in route.calls.last.request.url.params


# ============================================================================
# Test: failure policy
# ============================================================================


class TestHierarchyFailures:
    """Test suite for fatal and degraded fetch failures."""

    @respx.mock
    @pytest.mark.asyncio
    async def test_folder_fetch_failure_keeps_folderless_lists(self, server, base_url):
        respx.get(f"{base_url}/team/9001/space").mock(
            return_value=ok("spaces", [mock_space("1", "Alpha")])
        )
        respx.get(f"{base_url}/space/1/folder").mock(
            return_value=httpx.Response(500, text="upstream down")
        )
        respx.get(f"{base_url}/space/1/list").mock(
            return_value=ok("lists", [mock_list("300", "Inbox")])
        )

        text = await call_hierarchy(server)

        assert text.split("\n") == [
            "Workspace (Team ID: 9001)",
            "└── Space: Alpha (ID: 1)",
            "    └── List (Folderless): Inbox (ID: 300)",
        ]
        assert "Folder:" not in text

    @respx.mock
    @pytest.mark.asyncio
    async def test_folder_list_fetch_failure_renders_empty_folder(
        self, server, base_url
    ):
        routes = mock_two_space_workspace(respx, base_url)
        routes["backend_lists"].mock(return_value=httpx.Response(404))

        text = await call_hierarchy(server)

        assert "│   └── Folder: Backend (ID: 10)" in text
        assert "List: API" not in text
        assert "List (Folderless): Inbox (ID: 200)" in text

    @respx.mock
    @pytest.mark.asyncio
    async def test_spaces_fetch_failure_is_fatal(self, server, base_url):
        respx.get(f"{base_url}/team/9001/space").mock(
            return_value=httpx.Response(401, json={"err": "Token invalid"})
        )

        with pytest.raises(ToolError) as exc_info:
            await call_hierarchy(server)

        message = str(exc_info.value)
        assert "Failed to build hierarchy: ClickUp API error: 401" in message
        assert "Workspace (Team ID" not in message

    @pytest.mark.asyncio
    async def test_strict_mode_makes_branch_failure_fatal(self, strict_server, base_url):
        with respx.mock(assert_all_called=False) as mock:
            routes = mock_two_space_workspace(mock, base_url)
            routes["beta_lists"].mock(return_value=httpx.Response(503, text="busy"))

            with pytest.raises(ToolError) as exc_info:
                await call_hierarchy(strict_server)

        assert "Failed to build hierarchy: ClickUp API error: 503" in str(
            exc_info.value
        )

    @pytest.mark.asyncio
    async def test_transport_error_is_fatal(self, server, base_url):
        with respx.mock(assert_all_called=False) as mock:
            routes = mock_two_space_workspace(mock, base_url)
            routes["alpha_folders"].mock(side_effect=httpx.ConnectError("refused"))

            with pytest.raises(ToolError) as exc_info:
                await call_hierarchy(server)

        assert "Failed to build hierarchy: refused" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_missing_credentials_makes_no_request(self, no_credentials_settings):
        server = FastMCP("test-clickup")
        hierarchy.register(server, no_credentials_settings)
        with respx.mock(assert_all_called=False) as mock:
            route = mock.route(host="api.clickup.com")
            with pytest.raises(ToolError) as exc_info:
                await call_hierarchy(server)

        assert "API key and team ID are required" in str(exc_info.value)
        assert_not_requested(route)

    @pytest.mark.asyncio
    async def test_unparseable_branch_body_is_fatal(self, server, base_url):
        with respx.mock(assert_all_called=False) as mock:
            routes = mock_two_space_workspace(mock, base_url)
            routes["alpha_folders"].mock(
                return_value=httpx.Response(200, text="<html>maintenance</html>")
            )

            with pytest.raises(ToolError) as exc_info:
                await call_hierarchy(server)

        message = str(exc_info.value)
        assert "Failed to build hierarchy: Unexpected response" in message
        assert "/space/1/folder" in message

    @pytest.mark.asyncio
    async def test_item_without_id_is_fatal(self, server, base_url):
        with respx.mock(assert_all_called=False) as mock:
            routes = mock_two_space_workspace(mock, base_url)
            routes["beta_lists"].mock(return_value=ok("lists", [{"name": "No id"}]))

            with pytest.raises(ToolError) as exc_info:
                await call_hierarchy(server)

        message = str(exc_info.value)
        assert "Failed to build hierarchy: Unexpected response" in message
        assert "/space/2/list" in message
