"""
Authenticator MCP Server

Registers the credential operations as MCP tools on a FastMCP server and
serves them over stdio.

FastMCP validates tool arguments against the annotated signatures first;
the router then applies its own non-empty checks before calling the backend.
"""

import asyncio
import logging
from typing import Annotated, Optional, Sequence

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from authenticator_mcp.backend import AuthenticatorClient
from authenticator_mcp.configs import (
    BACKEND_BASE_URL,
    SERVER_NAME,
    get_logger,
    load_config_or_exit,
    setup_logging,
)
from authenticator_mcp.configs.logging import ROOT_LOGGER_NAME
from authenticator_mcp.tools import Router
from authenticator_mcp.tools.manifest import USERNAME_DESCRIPTION, WEBSITE_DESCRIPTION
from authenticator_mcp.utils.stdout_guard import guard_stdout
from authenticator_mcp.version import __version__

logger = get_logger("server")

Website = Annotated[str, Field(description=WEBSITE_DESCRIPTION)]
Username = Annotated[str, Field(description=USERNAME_DESCRIPTION)]

# MCP syslog-style levels onto stdlib levels
MCP_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "notice": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "alert": logging.CRITICAL,
    "emergency": logging.CRITICAL,
}


def create_server(router: Router) -> FastMCP:
    """Build a FastMCP server exposing the router's operations as tools."""
    mcp = FastMCP(SERVER_NAME)
    # Advertised in the initialize handshake instead of the mcp package version
    mcp._mcp_server.version = __version__
    operations = router.operations

    async def get_2fa_code(website: Website, username: Username) -> str:
        result = await router.call("get_2fa_code", {"website": website, "username": username})
        return result.text

    async def get_password(website: Website, username: Username) -> str:
        result = await router.call("get_password", {"website": website, "username": username})
        return result.text

    async def get_account_list(website: Website) -> str:
        result = await router.call("get_account_list", {"website": website})
        return result.text

    for fn in (get_2fa_code, get_password, get_account_list):
        operation = operations[fn.__name__]
        mcp.tool(name=operation.name, description=operation.description)(fn)

    @mcp._mcp_server.set_logging_level()
    async def set_logging_level(level: str) -> None:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(MCP_LOG_LEVELS.get(level, logging.INFO))
        logger.info(f"Log level set to {level} by client")

    return mcp


async def serve(mcp: FastMCP) -> None:
    """Run the stdio session with stdout restricted to JSON frames."""
    with guard_stdout():
        logger.info("Server connected and ready to process requests")
        await mcp.run_stdio_async()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the MCP server."""
    config = load_config_or_exit(argv, description="Authenticator App MCP server")
    setup_logging()
    logger.info(
        f"Starting Authenticator MCP server, backend: {BACKEND_BASE_URL}, "
        f"token source: {config.token_source}"
    )

    router = Router(AuthenticatorClient(config.access_token))
    try:
        asyncio.run(serve(create_server(router)))
    except KeyboardInterrupt:
        logger.info("Server interrupted")
