"""
Credential Operation Router

Single registry of the three credential operations. Both transports call
through here, so validation and response text are defined once.

Each operation is reachable by its MCP tool name (get_2fa_code) or its
JSON-RPC alias (get2FACode).
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Optional

from authenticator_mcp.backend import (
    AccountList,
    AuthenticatorClient,
    Password,
    TwoFactorCode,
)
from authenticator_mcp.configs import get_logger
from authenticator_mcp.exceptions import ParameterValidationError, UnknownOperationError

logger = get_logger("router")


@dataclass(frozen=True)
class OperationResult:
    """Reply for one operation: JSON-ready payload plus caller-facing text."""

    payload: dict[str, Any]
    text: str


@dataclass(frozen=True)
class Operation:
    """A named credential lookup and the fields it requires."""

    name: str
    rpc_method: str
    description: str
    required: tuple[str, ...]
    handler: Callable[..., Awaitable[OperationResult]]


def format_code(result: TwoFactorCode) -> str:
    return f"The 2FA code is {result.code}, it will expire in {result.valid_for} seconds."


def format_password(result: Password) -> str:
    return f"The password is {result.password}."


def format_accounts(result: AccountList) -> str:
    # An empty list renders as "(none)" rather than a dangling ": ."
    joined = ", ".join(result.accounts) if result.accounts else "(none)"
    return f"The accounts are: {joined}."


def validate_params(params: Any, required: tuple[str, ...]) -> dict[str, str]:
    """
    Check that every required field is a non-empty string.

    Args:
        params: Raw request parameters (may be None or a non-mapping)
        required: Field names the operation needs

    Returns:
        Dict with just the required fields

    Raises:
        ParameterValidationError: Listing every missing or invalid field
    """
    if not isinstance(params, Mapping):
        raise ParameterValidationError(list(required))

    invalid = [
        name
        for name in required
        if not isinstance(params.get(name), str) or not params.get(name)
    ]
    if invalid:
        raise ParameterValidationError(invalid)
    return {name: params[name] for name in required}


class Router:
    """
    Validates credential requests and dispatches them to the backend.

    Usage:
        router = Router(AuthenticatorClient(token))
        result = await router.call("get_2fa_code", {"website": "github.com", "username": "me"})
        print(result.text)
    """

    def __init__(self, client: AuthenticatorClient):
        self.client = client
        self.operations: dict[str, Operation] = {}
        self._register(
            Operation(
                name="get_2fa_code",
                rpc_method="get2FACode",
                description="Retrieve the current 2FA code for a username when logging into a website.",
                required=("website", "username"),
                handler=self._get_2fa_code,
            )
        )
        self._register(
            Operation(
                name="get_password",
                rpc_method="getPassword",
                description="Retrieve the password for a username when logging into a website.",
                required=("website", "username"),
                handler=self._get_password,
            )
        )
        self._register(
            Operation(
                name="get_account_list",
                rpc_method="getAccountList",
                description="Retrieve the accounts can be used when logging into a website.",
                required=("website",),
                handler=self._get_account_list,
            )
        )

    def _register(self, operation: Operation) -> None:
        self.operations[operation.name] = operation

    def get_operation(self, name: Optional[str]) -> Operation:
        """Look up an operation by tool name or JSON-RPC alias."""
        for operation in self.operations.values():
            if name in (operation.name, operation.rpc_method):
                return operation
        raise UnknownOperationError(name)

    async def call(self, name: Optional[str], params: Any) -> OperationResult:
        """
        Validate parameters and run one operation.

        Validation happens before any HTTP request. Backend errors
        propagate unchanged.
        """
        operation = self.get_operation(name)
        try:
            arguments = validate_params(params, operation.required)
        except ParameterValidationError as e:
            logger.warning(f"{operation.name} rejected: missing {e.fields}")
            raise

        logger.info(f"{operation.name} called for website={arguments['website']!r}")
        return await operation.handler(**arguments)

    async def _get_2fa_code(self, website: str, username: str) -> OperationResult:
        result = await self.client.fetch_code(website, username)
        return OperationResult(payload=result.model_dump(), text=format_code(result))

    async def _get_password(self, website: str, username: str) -> OperationResult:
        result = await self.client.fetch_password(website, username)
        return OperationResult(payload=result.model_dump(), text=format_password(result))

    async def _get_account_list(self, website: str) -> OperationResult:
        result = await self.client.fetch_accounts(website)
        logger.debug(f"{len(result.accounts)} accounts for {website!r}")
        return OperationResult(payload=result.model_dump(), text=format_accounts(result))
