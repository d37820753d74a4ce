from httpx import Response

from .. import request
from ._base_service import BaseService


class DiscoveryService(BaseService):
    """Service for server discovery and capability queries."""

    def versions(self) -> Response:
        """Get the versions of the Client-Server API supported by the homeserver.

        Returns:
            Response: ``{"versions": [...], "unstable_features": {...}}``.

        Examples:
            ```python
            from matrixsdk import MatrixSDK

            sdk = MatrixSDK(base_url="https://matrix.org")
            print(sdk.discovery.versions().json()["versions"])
            ```
        """
        return self.request(request.spec_versions(self.base_url))

    async def versions_async(self) -> Response:
        return await self.request_async(request.spec_versions(self.base_url))

    def well_known(self) -> Response:
        """Get the ``.well-known`` client discovery document of the domain."""
        return self.request(request.server_discovery(self.base_url))

    async def well_known_async(self) -> Response:
        return await self.request_async(request.server_discovery(self.base_url))

    def capabilities(self) -> Response:
        """Get the capabilities of the homeserver. Requires an access token."""
        return self.request(
            request.server_capabilities(self.base_url, self.access_token)
        )

    async def capabilities_async(self) -> Response:
        return await self.request_async(
            request.server_capabilities(self.base_url, self.access_token)
        )

    def public_rooms(self) -> Response:
        """List the rooms published in the homeserver's public room directory."""
        return self.request(request.room_discovery(self.base_url))

    async def public_rooms_async(self) -> Response:
        return await self.request_async(request.room_discovery(self.base_url))
