from collections.abc import Mapping
from typing import Any, Optional

from .._utils import RequestSpec, encode_auth, header_bearer, merge_body, require_str
from .._utils.constants import CLIENT_R0
from ..models.auth import AuthCredential, Token, UserPassword
from ..models.errors import InvalidArgumentError

LOGIN_PATH = f"{CLIENT_R0}/login"


def login(
    base_url: str,
    credential: Optional[AuthCredential] = None,
    opts: Optional[Mapping[str, Any]] = None,
) -> RequestSpec:
    """Build a login request.

    Without a credential this is the ``GET`` form, which asks the homeserver
    for its supported login flows. With a credential it is the ``POST`` form
    that exchanges the credential for an access token.

    Args:
        base_url: The homeserver base URL.
        credential: ``Token`` or ``UserPassword``.
        opts: Extra body fields such as ``device_id`` or
            ``initial_device_display_name``. They override the fields computed
            from the credential.

    Returns:
        RequestSpec: The login request.

    Raises:
        InvalidArgumentError: If the credential is not a ``Token`` or a
            ``UserPassword``, or if ``opts`` is given without a credential.

    Examples:
        ```python
        from matrixsdk import request
        from matrixsdk.models import login_user

        spec = request.login(
            "https://matrix.org",
            login_user("maurice_moss", "super-secure-password"),
            {"device_id": "ABCDEF"},
        )
        ```
    """
    base_url = require_str("base_url", base_url)

    if credential is None:
        if opts:
            raise InvalidArgumentError("credential", "required when opts are given")
        return RequestSpec(method="GET", base_url=base_url, path=LOGIN_PATH)

    if not isinstance(credential, (Token, UserPassword)):
        raise InvalidArgumentError(
            "credential",
            f"login accepts Token or UserPassword, got {type(credential).__name__}",
        )

    return RequestSpec(
        method="POST",
        base_url=base_url,
        path=LOGIN_PATH,
        body=merge_body(encode_auth(credential), opts),
    )


def logout(base_url: str, token: str) -> RequestSpec:
    """Invalidate the given access token."""
    return _logout(base_url, f"{CLIENT_R0}/logout", token)


def logout_all(base_url: str, token: str) -> RequestSpec:
    """Invalidate every access token of the user owning ``token``."""
    return _logout(base_url, f"{CLIENT_R0}/logout/all", token)


def _logout(base_url: str, path: str, token: str) -> RequestSpec:
    return RequestSpec(
        method="POST",
        base_url=require_str("base_url", base_url),
        path=path,
        headers=header_bearer(require_str("token", token)),
    )
