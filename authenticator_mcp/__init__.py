"""
Authenticator MCP - a local bridge to the Authenticator App backend.

Exposes 2FA codes, passwords and account lists to tool-calling clients over
MCP or line-delimited JSON-RPC, delegating storage to the local backend.
"""

from authenticator_mcp.version import __version__

__all__ = ["__version__"]
