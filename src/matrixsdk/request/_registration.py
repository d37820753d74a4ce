from collections.abc import Mapping
from typing import Any, Optional

from .._utils import RequestSpec, encode_auth, merge_body, require_options, require_str
from .._utils.constants import CLIENT_R0
from ..models.auth import Dummy
from ..models.errors import InvalidArgumentError

REGISTER_PATH = f"{CLIENT_R0}/register"


def register_guest(
    base_url: str, opts: Optional[Mapping[str, Any]] = None
) -> RequestSpec:
    """Register a guest account.

    The homeserver ignores every body field except
    ``initial_device_display_name`` for guest registration, but ``opts`` is
    forwarded unchanged.
    """
    return RequestSpec(
        method="POST",
        base_url=require_str("base_url", base_url),
        path=f"{REGISTER_PATH}?kind=guest",
        body=require_options(opts),
    )


def register_user(
    base_url: str, password: str, opts: Optional[Mapping[str, Any]] = None
) -> RequestSpec:
    """Register a user account, completing the dummy auth stage.

    Args:
        base_url: The homeserver base URL.
        password: Password of the new account.
        opts: Extra body fields such as ``username``, ``device_id``,
            ``initial_device_display_name`` or ``inhibit_login``.

    Returns:
        RequestSpec: A ``POST`` with body
        ``{"password": ..., "auth": {"type": "m.login.dummy"}}`` merged with
        ``opts``.
    """
    defaults = {
        "password": require_str("password", password),
        "auth": encode_auth(Dummy()),
    }
    return RequestSpec(
        method="POST",
        base_url=require_str("base_url", base_url),
        path=REGISTER_PATH,
        body=merge_body(defaults, opts),
    )


def register_email(
    base_url: str,
    client_secret: str,
    email: str,
    send_attempt: int,
    opts: Optional[Mapping[str, Any]] = None,
) -> RequestSpec:
    """Request a validation token for registering with an email address.

    The homeserver checks that the address is not already associated with an
    account. A ``send_attempt`` key in ``opts`` replaces the positional
    value, as for any other field.
    """
    if isinstance(send_attempt, bool) or not isinstance(send_attempt, int):
        raise InvalidArgumentError("send_attempt", "expected an integer")
    if send_attempt < 1:
        raise InvalidArgumentError("send_attempt", "must be a positive integer")

    defaults = {
        "client_secret": require_str("client_secret", client_secret),
        "email": require_str("email", email),
        "send_attempt": send_attempt,
    }
    return RequestSpec(
        method="POST",
        base_url=require_str("base_url", base_url),
        path=f"{REGISTER_PATH}/email/requestToken",
        body=merge_body(defaults, opts),
    )


def username_availability(base_url: str, username: str) -> RequestSpec:
    """Check that a username is available and valid on the homeserver.

    The username is sent as a query parameter, so the transport
    percent-encodes it like any other query value.
    """
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=f"{REGISTER_PATH}/available",
        query_params=[("username", require_str("username", username))],
    )
