"""
MCP Stdio Server

Exposes get_2fa_code, get_password and get_account_list as MCP tools.
"""

from authenticator_mcp.controllers.mcp_server.server import create_server, main, serve

__all__ = ["create_server", "main", "serve"]
