"""
Line-Delimited JSON-RPC Bridge

Reads JSON-RPC requests from stdin, one per line, resolves them against the
Authenticator App backend, and writes one JSON response per line to stdout.
"""

from authenticator_mcp.controllers.bridge.bridge import JsonRpcBridge, main

__all__ = ["JsonRpcBridge", "main"]
