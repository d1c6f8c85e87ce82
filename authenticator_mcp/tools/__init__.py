"""
Authenticator Tools

Credential operations shared by the MCP server and the JSON-RPC bridge:
1. get_2fa_code (get2FACode) - current one-time code
2. get_password (getPassword) - stored password
3. get_account_list (getAccountList) - accounts for a website
"""

from authenticator_mcp.tools.manifest import MANIFEST, get_manifest
from authenticator_mcp.tools.router import Operation, OperationResult, Router

__all__ = [
    "MANIFEST",
    "get_manifest",
    "Operation",
    "OperationResult",
    "Router",
]
