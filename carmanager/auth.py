"""Login accounts and the roles they grant."""

from __future__ import annotations

from enum import IntEnum


class Role(IntEnum):
    """What a signed-in user may do."""

    ADMIN = 1
    STAFF = 2


class AuthenticationError(Exception):
    """Raised when a user name and password do not match an account."""


_CREDENTIALS = {
    "admin": ("123", Role.ADMIN),
    "staff": ("456", Role.STAFF),
    "user": ("123", Role.STAFF),
}


def authenticate(username: str, password: str) -> Role:
    """Return the role of the matching account.

    The user name is compared without regard to case, the password exactly.
    """
    account = _CREDENTIALS.get(username.lower())
    if account is None or account[0] != password:
        raise AuthenticationError("Invalid Login!")
    return account[1]