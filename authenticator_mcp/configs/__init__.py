"""
Authenticator Bridge Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from authenticator_mcp.configs.logging import get_logger, setup_logging

# Constants
from authenticator_mcp.configs.constants import (
    ACCESS_TOKEN_ENV_VAR,
    BACKEND_BASE_URL,
    SERVER_DESCRIPTION,
    SERVER_NAME,
)

# Startup
from authenticator_mcp.configs.settings import (
    ServerConfig,
    load_config_or_exit,
    load_server_config,
    resolve_config,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Constants
    "ACCESS_TOKEN_ENV_VAR",
    "BACKEND_BASE_URL",
    "SERVER_DESCRIPTION",
    "SERVER_NAME",
    # Startup
    "ServerConfig",
    "load_config_or_exit",
    "load_server_config",
    "resolve_config",
]
