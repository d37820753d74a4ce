from .._utils import RequestSpec, header_bearer, require_str
from .._utils.constants import CLIENT_R0, CLIENT_VERSIONS_PATH, WELL_KNOWN_CLIENT_PATH


def spec_versions(base_url: str) -> RequestSpec:
    """Versions of the Client-Server API supported by the homeserver.

    Examples:
        >>> spec_versions("https://matrix.org").path
        '/_matrix/client/versions'
    """
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=CLIENT_VERSIONS_PATH,
    )


def server_discovery(base_url: str) -> RequestSpec:
    """Well-known discovery information for the domain."""
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=WELL_KNOWN_CLIENT_PATH,
    )


def server_capabilities(base_url: str, token: str) -> RequestSpec:
    """The homeserver's supported feature set and other capabilities."""
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=f"{CLIENT_R0}/capabilities",
        headers=header_bearer(require_str("token", token)),
    )


def room_discovery(base_url: str) -> RequestSpec:
    """Public rooms published in the homeserver's room directory."""
    return RequestSpec(
        method="GET",
        base_url=require_str("base_url", base_url),
        path=f"{CLIENT_R0}/publicRooms",
    )
