#!/usr/bin/env python3
"""
Line-Delimited JSON-RPC Bridge

Reads JSON-RPC requests (getManifest, get2FACode, getPassword,
getAccountList) from stdin and writes one response per line to stdout.

Environment variables:
    AUTHENTICATOR_ACCESS_TOKEN: Backend access token (--access-token wins)
    AUTHENTICATOR_DEBUG: Enable debug logging (default: false)
    AUTHENTICATOR_LOG_FILE: Optional log file path
"""

from authenticator_mcp.controllers.bridge import main

if __name__ == "__main__":
    main()
