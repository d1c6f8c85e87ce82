"""
Tests for the MCP tool server
"""

import asyncio
import logging
from unittest.mock import MagicMock

import pytest
from mcp import types
from mcp.server.fastmcp.exceptions import ToolError

from authenticator_mcp.controllers.mcp_server import create_server, main
from authenticator_mcp.controllers.mcp_server import server as server_module


def call_text(server, name: str, arguments: dict) -> str:
    """Invoke a tool and return its text content."""
    result = asyncio.run(server.call_tool(name, arguments))
    # Newer FastMCP releases return (content, structured_content)
    content = result[0] if isinstance(result, tuple) else result
    return content[0].text


@pytest.fixture
def server(router):
    return create_server(router)


class TestToolRegistration:
    """Tests for tool discovery."""

    def test_lists_three_tools(self, server):
        tools = asyncio.run(server.list_tools())

        assert sorted(tool.name for tool in tools) == [
            "get_2fa_code",
            "get_account_list",
            "get_password",
        ]

    def test_schemas_declare_required_strings(self, server):
        tools = {tool.name: tool for tool in asyncio.run(server.list_tools())}

        code_schema = tools["get_2fa_code"].inputSchema
        assert sorted(code_schema["required"]) == ["username", "website"]
        assert code_schema["properties"]["website"]["type"] == "string"
        assert "github.com" in code_schema["properties"]["website"]["description"]

        accounts_schema = tools["get_account_list"].inputSchema
        assert accounts_schema["required"] == ["website"]
        assert "username" not in accounts_schema["properties"]

    def test_descriptions(self, server):
        tools = {tool.name: tool for tool in asyncio.run(server.list_tools())}

        assert tools["get_password"].description == (
            "Retrieve the password for a username when logging into a website."
        )


class TestToolCalls:
    """Tests for tool invocation."""

    def test_get_2fa_code(self, server, backend):
        backend.reply("/code", body={"code": "123456", "valid_for": 30})

        text = call_text(
            server,
            "get_2fa_code",
            {"website": "github.com", "username": "john.doe@example.com"},
        )

        assert text == "The 2FA code is 123456, it will expire in 30 seconds."

    def test_get_password(self, server, backend):
        backend.reply("/password", body={"password": "hunter2"})

        text = call_text(server, "get_password", {"website": "github.com", "username": "me"})

        assert text == "The password is hunter2."

    def test_get_account_list(self, server, backend):
        backend.reply("/account_list", body=["alice", "bob"])

        text = call_text(server, "get_account_list", {"website": "github.com"})

        assert text == "The accounts are: alice, bob."

    def test_schema_rejects_missing_argument(self, server, backend):
        with pytest.raises(ToolError):
            asyncio.run(server.call_tool("get_password", {"website": "github.com"}))

        assert backend.requests == []

    def test_router_rejects_empty_argument(self, server, backend):
        with pytest.raises(ToolError, match="Missing required parameters: website"):
            asyncio.run(server.call_tool("get_account_list", {"website": ""}))

        assert backend.requests == []

    def test_backend_error_is_tool_error(self, server, backend):
        backend.reply("/code", status=401, body="unauthorized")

        with pytest.raises(ToolError, match="HTTP 401"):
            asyncio.run(
                server.call_tool("get_2fa_code", {"website": "github.com", "username": "me"})
            )

        assert len(backend.requests) == 1


class TestInitialization:
    """Tests for what the server advertises during the initialize handshake."""

    def test_advertises_package_version(self, server):
        options = server._mcp_server.create_initialization_options()

        assert options.server_name == "Authenticator App MCP"
        assert options.server_version == "1.0.0"

    def test_advertises_logging_capability(self, server):
        options = server._mcp_server.create_initialization_options()

        assert options.capabilities.logging is not None
        assert options.capabilities.tools is not None

    def test_set_level_adjusts_root_logger(self, server):
        root = logging.getLogger("authenticator")
        previous = root.level
        handler = server._mcp_server.request_handlers[types.SetLevelRequest]
        try:
            asyncio.run(
                handler(
                    types.SetLevelRequest(
                        method="logging/setLevel",
                        params=types.SetLevelRequestParams(level="debug"),
                    )
                )
            )
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)


class TestStartup:
    """Tests for the server entry point."""

    def test_missing_token_exits_before_serving(self, monkeypatch, tmp_path, capsys):
        monkeypatch.delenv("AUTHENTICATOR_ACCESS_TOKEN", raising=False)
        monkeypatch.chdir(tmp_path)
        serve = MagicMock()
        monkeypatch.setattr(server_module, "serve", serve)

        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
        assert "AUTHENTICATOR_ACCESS_TOKEN is required" in capsys.readouterr().err
        serve.assert_not_called()
