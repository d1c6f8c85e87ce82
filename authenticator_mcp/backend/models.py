"""
Backend Response Models

Shapes of the JSON bodies returned by the Authenticator App backend.
Bodies are validated against these at the boundary; anything else is
treated as a backend failure.
"""

from pydantic import BaseModel, TypeAdapter


class TwoFactorCode(BaseModel):
    """Currently valid one-time code. Never cached."""

    code: str
    valid_for: int


class Password(BaseModel):
    """Stored password for an account."""

    password: str

    def __repr__(self) -> str:
        return "Password(password='***')"

    __str__ = __repr__


class AccountList(BaseModel):
    """Accounts registered for a website, in backend order."""

    accounts: list[str]


# /account_list returns a bare JSON array rather than an object
ACCOUNT_NAMES = TypeAdapter(list[str])
