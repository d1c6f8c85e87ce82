"""
Authenticator Bridge Startup Configuration

Resolves the backend access token once at startup.

Priority:
1. --access-token command-line flag
2. AUTHENTICATOR_ACCESS_TOKEN environment variable
   (a .env file in the working directory is loaded first, without
   overriding variables that are already set)
"""

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Mapping, Optional, Sequence

from dotenv import load_dotenv

from authenticator_mcp.configs.constants import ACCESS_TOKEN_ENV_VAR
from authenticator_mcp.exceptions import MissingConfigError
from authenticator_mcp.version import __version__

TokenSource = Literal["cli", "env"]


@dataclass(frozen=True)
class ServerConfig:
    """Process-wide settings, immutable after startup."""

    access_token: str
    token_source: TokenSource

    def __repr__(self) -> str:
        return f"ServerConfig(access_token='***', token_source={self.token_source!r})"


def build_parser(description: str) -> argparse.ArgumentParser:
    """Build the shared command-line parser for both entry points."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--access-token",
        dest="access_token",
        help=f"Authenticator App access token (overrides {ACCESS_TOKEN_ENV_VAR})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def load_env_file(path: Optional[Path] = None) -> bool:
    """Load a .env file from the working directory into os.environ."""
    env_path = path or Path.cwd() / ".env"
    return load_dotenv(env_path, override=False)


def resolve_config(
    cli_token: Optional[str],
    environ: Optional[Mapping[str, str]] = None,
) -> ServerConfig:
    """
    Pick the access token from the CLI flag or the environment.

    Args:
        cli_token: Value of --access-token, if given
        environ: Environment mapping (defaults to os.environ)

    Returns:
        ServerConfig with the token and where it came from

    Raises:
        MissingConfigError: Neither source provides a token
    """
    if environ is None:
        environ = os.environ

    if cli_token:
        return ServerConfig(access_token=cli_token, token_source="cli")

    env_token = environ.get(ACCESS_TOKEN_ENV_VAR)
    if env_token:
        return ServerConfig(access_token=env_token, token_source="env")

    raise MissingConfigError(
        f"{ACCESS_TOKEN_ENV_VAR} is required (via CLI argument --access-token or .env file)"
    )


def load_server_config(
    argv: Optional[Sequence[str]] = None,
    description: str = "Authenticator App MCP",
) -> ServerConfig:
    """Parse arguments, load .env and resolve the access token."""
    args = build_parser(description).parse_args(argv)
    load_env_file()
    return resolve_config(args.access_token)


def load_config_or_exit(
    argv: Optional[Sequence[str]] = None,
    description: str = "Authenticator App MCP",
) -> ServerConfig:
    """Resolve startup config, exiting with status 1 when no token is available."""
    try:
        return load_server_config(argv, description)
    except MissingConfigError as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)
