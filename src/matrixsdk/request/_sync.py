from collections.abc import Mapping
from typing import Any, Optional

from .._utils import RequestSpec, header_bearer, merge_query, require_str
from .._utils.constants import CLIENT_R0


def sync(
    base_url: str, token: str, opts: Optional[Mapping[str, Any]] = None
) -> RequestSpec:
    """Synchronise the client's state with the latest state on the server.

    Recognized ``opts`` keys are ``since``, ``filter``, ``full_state``,
    ``set_presence`` and ``timeout``. They become query parameters in
    insertion order; any other key is forwarded as well.

    Examples:
        >>> spec = sync("https://matrix.org", "token", {"since": "s1", "timeout": 500})
        >>> spec.query_params
        (('since', 's1'), ('timeout', 500))
    """
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=f"{CLIENT_R0}/sync",
        query_params=merge_query([], opts),
        headers=header_bearer(require_str("token", token)),
    )
