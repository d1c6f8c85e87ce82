"""
Authenticator App backend access.
"""

from authenticator_mcp.backend.client import AuthenticatorClient
from authenticator_mcp.backend.models import AccountList, Password, TwoFactorCode

__all__ = ["AuthenticatorClient", "AccountList", "Password", "TwoFactorCode"]
