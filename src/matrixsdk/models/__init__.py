from .auth import (
    AuthCredential,
    Dummy,
    Token,
    UserPassword,
    login_dummy,
    login_token,
    login_user,
)
from .errors import (
    AccessTokenMissingError,
    BaseUrlMissingError,
    InvalidArgumentError,
    TransportError,
)

__all__ = [
    "AuthCredential",
    "Dummy",
    "Token",
    "UserPassword",
    "login_dummy",
    "login_token",
    "login_user",
    "AccessTokenMissingError",
    "BaseUrlMissingError",
    "InvalidArgumentError",
    "TransportError",
]
