"""
Authenticator Bridge Exception Hierarchy

Centralized exception classes for structured error handling across the bridge.
All bridge-specific exceptions inherit from AuthenticatorError.

Usage:
    from authenticator_mcp.exceptions import BackendError, ParameterValidationError

    try:
        result = await router.call("get_password", params)
    except ParameterValidationError as e:
        logger.warning(f"Rejected request: {e}")
"""


class AuthenticatorError(Exception):
    """Base exception for all bridge errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(AuthenticatorError):
    """Error in bridge configuration."""

    pass


class MissingConfigError(ConfigurationError):
    """Required configuration value is missing."""

    pass


# =============================================================================
# Tool Errors
# =============================================================================


class ToolError(AuthenticatorError):
    """Base class for tool invocation errors."""

    pass


class ParameterValidationError(ToolError):
    """Required tool parameters are missing or not non-empty strings."""

    def __init__(self, fields: list[str]):
        super().__init__(
            f"Missing required parameters: {', '.join(fields)}",
            {"fields": fields},
        )
        self.fields = fields


class UnknownOperationError(ToolError):
    """No operation is registered under the requested name."""

    def __init__(self, name: str | None):
        super().__init__(f"Unknown method: {name}")
        self.name = name


# =============================================================================
# Backend Errors
# =============================================================================


class BackendError(AuthenticatorError):
    """Base class for failures talking to the authenticator backend."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ):
        details = {}
        if status_code is not None:
            details["status_code"] = status_code
        if response_text:
            details["response_text"] = response_text[:200]
        super().__init__(message, details)
        self.status_code = status_code
        self.response_text = response_text


class BackendStatusError(BackendError):
    """Backend answered with a non-2xx status."""

    pass


class BackendConnectionError(BackendError):
    """Failed to reach the backend."""

    pass


class BackendResponseError(BackendError):
    """Backend body was not JSON or did not have the expected shape."""

    pass
