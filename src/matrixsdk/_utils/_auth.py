from typing import Any

from ..models.auth import Dummy, Token, UserPassword
from ..models.errors import InvalidArgumentError
from .constants import (
    HEADER_AUTHORIZATION,
    ID_USER,
    LOGIN_DUMMY,
    LOGIN_PASSWORD,
    LOGIN_TOKEN,
)


def encode_auth(credential: Any) -> dict[str, Any]:
    """Convert a credential into its Client-Server API body fragment.

    Args:
        credential: One of ``Token``, ``UserPassword`` or ``Dummy``.

    Returns:
        A fresh dict, e.g. ``{"type": "m.login.token", "token": "..."}``.

    Raises:
        InvalidArgumentError: If ``credential`` is not a known credential case.
    """
    match credential:
        case Token(token=token):
            return {"type": LOGIN_TOKEN, "token": token}
        case UserPassword(identifier=identifier, password=password):
            return {
                "type": LOGIN_PASSWORD,
                "identifier": {"type": ID_USER, "user": identifier},
                "password": password,
            }
        case Dummy():
            return {"type": LOGIN_DUMMY}
        case _:
            raise InvalidArgumentError(
                "credential",
                f"expected Token, UserPassword or Dummy, got {type(credential).__name__}",
            )


def header_bearer(token: str) -> list[tuple[str, str]]:
    return [(HEADER_AUTHORIZATION, f"Bearer {token}")]
