"""
Tool Schemas and Manifest

Static descriptions of the three credential operations, served as-is by
getManifest and reused for the MCP tool registrations.
"""

from typing import Any

from authenticator_mcp.configs.constants import SERVER_DESCRIPTION, SERVER_NAME

WEBSITE_DESCRIPTION = "The domain name of the website you need to login, e.g. 'github.com'."
USERNAME_DESCRIPTION = (
    "The username or email of the account you need to login, "
    "e.g. 'john.doe@example.com'."
)

WEBSITE_AND_USERNAME_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "website": {"type": "string", "description": WEBSITE_DESCRIPTION},
        "username": {"type": "string", "description": USERNAME_DESCRIPTION},
    },
    "required": ["website", "username"],
}

WEBSITE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "website": {"type": "string", "description": WEBSITE_DESCRIPTION},
    },
    "required": ["website"],
}

MANIFEST: dict[str, Any] = {
    "name": SERVER_NAME,
    "description": SERVER_DESCRIPTION,
    "functions": [
        {
            "name": "get2FACode",
            "description": "Get the current 2FA code for a specific website and username.",
            "parameters": WEBSITE_AND_USERNAME_SCHEMA,
        },
        {
            "name": "getPassword",
            "description": "Get the password for a specific website and username.",
            "parameters": WEBSITE_AND_USERNAME_SCHEMA,
        },
        {
            "name": "getAccountList",
            "description": "Get available accounts for a specific website.",
            "parameters": WEBSITE_SCHEMA,
        },
    ],
}


def get_manifest() -> dict[str, Any]:
    """Return the static capability description served by getManifest."""
    return MANIFEST
