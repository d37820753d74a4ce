from collections.abc import Mapping
from typing import Any, Optional

from .._utils import RequestSpec, encode_auth, header_bearer, merge_body, require_str
from .._utils.constants import CLIENT_R0
from ..models.auth import AuthCredential

ACCOUNT_PATH = f"{CLIENT_R0}/account"


def change_password(
    base_url: str,
    token: str,
    new_password: str,
    auth: Optional[AuthCredential] = None,
    opts: Optional[Mapping[str, Any]] = None,
) -> RequestSpec:
    """Change the password of the account owning ``token``.

    Args:
        base_url: The homeserver base URL.
        token: Access token of the account.
        new_password: The new password.
        auth: Credential for the user-interactive auth stage, usually a
            ``UserPassword`` with the current password. Omitted from the body
            when ``None``, which starts a new auth session.
        opts: Extra body fields, e.g. ``{"logout_devices": False}``.
    """
    defaults: dict[str, Any] = {"new_password": require_str("new_password", new_password)}
    if auth is not None:
        defaults["auth"] = encode_auth(auth)

    return RequestSpec(
        method="POST",
        base_url=require_str("base_url", base_url),
        path=f"{ACCOUNT_PATH}/password",
        headers=header_bearer(require_str("token", token)),
        body=merge_body(defaults, opts),
    )


def account_3pids(base_url: str, token: str) -> RequestSpec:
    """Third party identifiers associated with the account."""
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=f"{ACCOUNT_PATH}/3pid",
        headers=header_bearer(require_str("token", token)),
    )


def account_add_3pid(
    base_url: str,
    token: str,
    client_secret: str,
    sid: str,
    auth: Optional[AuthCredential] = None,
    opts: Optional[Mapping[str, Any]] = None,
) -> RequestSpec:
    """Bind a validated third party identifier to the account.

    ``client_secret`` and ``sid`` come from a previous ``requestToken`` call.
    """
    defaults: dict[str, Any] = {
        "client_secret": require_str("client_secret", client_secret),
        "sid": require_str("sid", sid),
    }
    if auth is not None:
        defaults["auth"] = encode_auth(auth)

    return RequestSpec(
        method="POST",
        base_url=require_str("base_url", base_url),
        path=f"{ACCOUNT_PATH}/3pid/add",
        headers=header_bearer(require_str("token", token)),
        body=merge_body(defaults, opts),
    )


def whoami(base_url: str, token: str) -> RequestSpec:
    """Information about the owner of ``token``."""
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=f"{ACCOUNT_PATH}/whoami",
        headers=header_bearer(require_str("token", token)),
    )
