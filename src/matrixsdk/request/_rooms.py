from collections.abc import Mapping
from typing import Any, Optional

from .._utils import (
    RequestSpec,
    encode_path_segment,
    header_bearer,
    merge_query,
    require_str,
)
from .._utils.constants import CLIENT_R0
from ..models.errors import InvalidArgumentError

DIRECTIONS = ("b", "f")


def _room_path(room_id: str, *rest: str) -> str:
    segments = [encode_path_segment(require_str("room_id", room_id)), *rest]
    return f"{CLIENT_R0}/rooms/" + "/".join(segments)


def room_event(base_url: str, token: str, room_id: str, event_id: str) -> RequestSpec:
    """A single event, by room and event ID.

    Examples:
        >>> room_event("https://matrix.org", "t", "!r:matrix.org", "$e").path
        '/_matrix/client/r0/rooms/%21r%3Amatrix.org/event/%24e'
    """
    event_id = encode_path_segment(require_str("event_id", event_id))
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=_room_path(room_id, "event", event_id),
        headers=header_bearer(require_str("token", token)),
    )


def room_state_event(
    base_url: str, token: str, room_id: str, event_type: str, state_key: str
) -> RequestSpec:
    """The content of one state event in a room.

    ``event_type`` is placed in the path as given; ``state_key`` is encoded
    and may be empty. A state key that already reads as encoded text, such as
    ``%21x``, is sent unchanged and so reaches the server as ``!x``.
    """
    event_type = require_str("event_type", event_type)
    state_key = encode_path_segment(require_str("state_key", state_key, allow_empty=True))
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=_room_path(room_id, "state", event_type, state_key),
        headers=header_bearer(require_str("token", token)),
    )


def room_state(base_url: str, token: str, room_id: str) -> RequestSpec:
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=_room_path(room_id, "state"),
        headers=header_bearer(require_str("token", token)),
    )


def room_members(
    base_url: str,
    token: str,
    room_id: str,
    opts: Optional[Mapping[str, Any]] = None,
) -> RequestSpec:
    """Member events of a room.

    Recognized ``opts`` keys: ``at``, ``membership``, ``not_membership``.
    """
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=_room_path(room_id, "members"),
        query_params=merge_query([], opts),
        headers=header_bearer(require_str("token", token)),
    )


def room_joined_members(base_url: str, token: str, room_id: str) -> RequestSpec:
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=_room_path(room_id, "joined_members"),
        headers=header_bearer(require_str("token", token)),
    )


def room_messages(
    base_url: str,
    token: str,
    room_id: str,
    from_token: str,
    direction: str,
    opts: Optional[Mapping[str, Any]] = None,
) -> RequestSpec:
    """A page of message and state events of a room.

    Args:
        base_url: The homeserver base URL.
        token: Access token.
        room_id: The room to paginate.
        from_token: Pagination token to start from (``from`` query parameter).
        direction: ``"b"`` for backwards or ``"f"`` for forwards.
        opts: Extra query parameters: ``to``, ``limit``, ``filter``.

    Returns:
        RequestSpec: A ``GET`` whose query starts with ``from`` and ``dir``,
        followed by ``opts``.
    """
    if direction not in DIRECTIONS:
        raise InvalidArgumentError("direction", f"expected 'b' or 'f', got {direction!r}")

    defaults = [("from", require_str("from_token", from_token)), ("dir", direction)]
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=_room_path(room_id, "messages"),
        query_params=merge_query(defaults, opts),
        headers=header_bearer(require_str("token", token)),
    )
