#!/usr/bin/env python3
"""
Authenticator MCP Server

Serves get_2fa_code, get_password and get_account_list as MCP tools over
stdio, backed by the local Authenticator App service.

Environment variables:
    AUTHENTICATOR_ACCESS_TOKEN: Backend access token (--access-token wins)
    AUTHENTICATOR_DEBUG: Enable debug logging (default: false)
    AUTHENTICATOR_LOG_FILE: Optional log file path
"""

from authenticator_mcp.controllers.mcp_server import main

if __name__ == "__main__":
    main()
