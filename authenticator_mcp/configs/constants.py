"""
Authenticator Bridge Constants

Fixed values shared by the backend client, the tool registry and startup.
"""

# --- Backend ---

BACKEND_PORT = 43457
BACKEND_BASE_URL = f"http://localhost:{BACKEND_PORT}/mcp/v1"

CODE_PATH = "/code"
PASSWORD_PATH = "/password"
ACCOUNT_LIST_PATH = "/account_list"

# --- Server identity ---

SERVER_NAME = "Authenticator App MCP"
SERVER_DESCRIPTION = "Fetch accounts, 2FA codes or passwords for a website login process."

# --- Environment variables ---

ACCESS_TOKEN_ENV_VAR = "AUTHENTICATOR_ACCESS_TOKEN"
DEBUG_ENV_VAR = "AUTHENTICATOR_DEBUG"
LOG_FILE_ENV_VAR = "AUTHENTICATOR_LOG_FILE"
