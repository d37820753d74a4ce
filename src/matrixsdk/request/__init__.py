"""Request builders for the Matrix Client-Server API.

Every function here is pure: it validates its arguments and returns a
``RequestSpec`` without performing any I/O.
"""

from ._account import account_3pids, account_add_3pid, change_password, whoami
from ._discovery import room_discovery, server_capabilities, server_discovery, spec_versions
from ._registration import (
    register_email,
    register_guest,
    register_user,
    username_availability,
)
from ._rooms import (
    room_event,
    room_joined_members,
    room_members,
    room_messages,
    room_state,
    room_state_event,
)
from ._session import login, logout, logout_all
from ._sync import sync

__all__ = [
    "spec_versions",
    "server_discovery",
    "server_capabilities",
    "room_discovery",
    "login",
    "logout",
    "logout_all",
    "register_guest",
    "register_user",
    "register_email",
    "username_availability",
    "change_password",
    "account_3pids",
    "account_add_3pid",
    "whoami",
    "sync",
    "room_event",
    "room_state_event",
    "room_state",
    "room_members",
    "room_joined_members",
    "room_messages",
]
