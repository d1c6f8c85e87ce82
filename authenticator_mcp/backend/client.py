"""
HTTP client for the Authenticator App backend.

The backend listens on localhost and serves three read-only endpoints under
/mcp/v1. Every request carries the bearer token resolved at startup.
"""

from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from authenticator_mcp.backend.models import (
    ACCOUNT_NAMES,
    AccountList,
    Password,
    TwoFactorCode,
)
from authenticator_mcp.configs import get_logger
from authenticator_mcp.configs.constants import (
    ACCOUNT_LIST_PATH,
    BACKEND_BASE_URL,
    CODE_PATH,
    PASSWORD_PATH,
)
from authenticator_mcp.exceptions import (
    BackendConnectionError,
    BackendResponseError,
    BackendStatusError,
)

logger = get_logger("backend")

ModelT = TypeVar("ModelT", bound=BaseModel)


class AuthenticatorClient:
    """
    Async HTTP client for the Authenticator App backend.

    Usage:
        client = AuthenticatorClient(access_token)
        code = await client.fetch_code("github.com", "john.doe@example.com")
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = BACKEND_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._access_token = access_token
        self._transport = transport

    def __repr__(self) -> str:
        return f"AuthenticatorClient(base_url={self.base_url!r})"

    async def _get(self, path: str, params: dict[str, str]) -> tuple[int, str, Any]:
        """
        Issue one authenticated GET and decode the JSON body.

        No retries: a single failed attempt is raised to the caller.

        Returns:
            (status code, raw body text, decoded JSON)
        """
        url = f"{self.base_url}{path}"
        headers = {"Authorization": f"Bearer {self._access_token}"}

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Backend request to {path} failed: {type(e).__name__}")
            raise BackendConnectionError(f"Backend request failed: {e}") from e

        if not response.is_success:
            logger.warning(
                f"HTTP error {response.status_code} from {path} "
                f"({len(response.text)} bytes)"
            )
            raise BackendStatusError(
                f"Backend request failed: HTTP {response.status_code}",
                status_code=response.status_code,
                response_text=response.text,
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Invalid JSON from {path} (status {response.status_code})")
            raise BackendResponseError(
                f"Invalid JSON response from {path}",
                status_code=response.status_code,
                response_text=response.text,
            ) from e

        logger.debug(f"GET {path} -> {response.status_code}")
        return response.status_code, response.text, payload

    @staticmethod
    def _validate(
        model: type[ModelT], path: str, status: int, text: str, payload: Any
    ) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Unexpected response shape from {path}: {e.error_count()} errors")
            raise BackendResponseError(
                f"Unexpected response shape from {path}",
                status_code=status,
                response_text=text,
            ) from e

    async def fetch_code(self, website: str, username: str) -> TwoFactorCode:
        """Get the currently valid 2FA code for an account."""
        status, text, payload = await self._get(
            CODE_PATH, {"website": website, "username": username}
        )
        return self._validate(TwoFactorCode, CODE_PATH, status, text, payload)

    async def fetch_password(self, website: str, username: str) -> Password:
        """Get the stored password for an account."""
        status, text, payload = await self._get(
            PASSWORD_PATH, {"website": website, "username": username}
        )
        return self._validate(Password, PASSWORD_PATH, status, text, payload)

    async def fetch_accounts(self, website: str) -> AccountList:
        """List the accounts available for a website."""
        status, text, payload = await self._get(ACCOUNT_LIST_PATH, {"website": website})
        try:
            accounts = ACCOUNT_NAMES.validate_python(payload)
        except ValidationError as e:
            logger.warning(
                f"Unexpected response shape from {ACCOUNT_LIST_PATH}: {e.error_count()} errors"
            )
            raise BackendResponseError(
                f"Unexpected response shape from {ACCOUNT_LIST_PATH}",
                status_code=status,
                response_text=text,
            ) from e
        return AccountList(accounts=accounts)
