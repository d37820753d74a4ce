"""Login credentials accepted by the Matrix login and user-interactive auth flows."""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Token(BaseModel):
    """Token-based login (``m.login.token``)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    token: str = Field(min_length=1)


class UserPassword(BaseModel):
    """Password login for a user identifier (``m.login.password``)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    identifier: str = Field(min_length=1)
    password: str

    def __repr__(self) -> str:
        """Override repr to prevent accidental password exposure in logs."""
        return f"UserPassword(identifier={self.identifier!r}, password='***')"

    def __str__(self) -> str:
        return self.__repr__()


class Dummy(BaseModel):
    """The no-op first factor (``m.login.dummy``) used for open registration."""

    model_config = ConfigDict(frozen=True, extra="forbid")


AuthCredential = Union[Token, UserPassword, Dummy]


def login_token(token: str) -> Token:
    return Token(token=token)


def login_user(identifier: str, password: str) -> UserPassword:
    return UserPassword(identifier=identifier, password=password)


def login_dummy() -> Dummy:
    return Dummy()
