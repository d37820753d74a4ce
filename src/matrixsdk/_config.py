from os import environ as env
from typing import Optional

from pydantic import BaseModel, HttpUrl, field_validator

from ._utils.constants import ENV_ACCESS_TOKEN, ENV_HOMESERVER_URL
from .models.errors import BaseUrlMissingError


class Config(BaseModel):
    base_url: str
    access_token: Optional[str] = None
    debug: bool = False

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        url_value = HttpUrl(value)
        assert url_value.scheme in ("http", "https"), "Invalid URL scheme"
        assert url_value.host, "Invalid URL"
        return value.rstrip("/")


def resolve_config(
    base_url: Optional[str] = None,
    access_token: Optional[str] = None,
    debug: bool = False,
) -> Config:
    """Build the SDK config from explicit values, falling back to the environment."""
    base_url_value = base_url or env.get(ENV_HOMESERVER_URL)
    access_token_value = access_token or env.get(ENV_ACCESS_TOKEN)

    if not base_url_value:
        raise BaseUrlMissingError()

    return Config(
        base_url=base_url_value,
        access_token=access_token_value or None,
        debug=debug,
    )
