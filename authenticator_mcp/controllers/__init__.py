"""
Transport adapters: line-delimited JSON-RPC bridge and MCP stdio server.
"""
