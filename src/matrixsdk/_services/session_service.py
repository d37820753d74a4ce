from typing import Any, Optional

from httpx import Response

from .. import request
from ..models.auth import AuthCredential
from ._base_service import BaseService


class SessionService(BaseService):
    """Service for logging in and out of the homeserver."""

    def login_types(self) -> Response:
        """Get the login flows supported by the homeserver."""
        return self.request(request.login(self.base_url))

    async def login_types_async(self) -> Response:
        return await self.request_async(request.login(self.base_url))

    def login(
        self,
        credential: AuthCredential,
        *,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        """Exchange a credential for an access token.

        The access token in the response is not stored; create a new
        ``MatrixSDK`` with it to make authenticated calls.

        Args:
            credential (AuthCredential): ``Token`` or ``UserPassword``.
            opts (Optional[dict[str, Any]]): Extra body fields, e.g.
                ``device_id`` or ``initial_device_display_name``.

        Returns:
            Response: Contains ``user_id``, ``access_token`` and ``device_id``.

        Examples:
            ```python
            from matrixsdk import MatrixSDK
            from matrixsdk.models import login_user

            sdk = MatrixSDK(base_url="https://matrix.org")
            response = sdk.session.login(login_user("maurice_moss", "password"))
            token = response.json()["access_token"]
            ```
        """
        return self.request(request.login(self.base_url, credential, opts))

    async def login_async(
        self,
        credential: AuthCredential,
        *,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        return await self.request_async(request.login(self.base_url, credential, opts))

    def logout(self) -> Response:
        """Invalidate the configured access token."""
        return self.request(request.logout(self.base_url, self.access_token))

    async def logout_async(self) -> Response:
        return await self.request_async(request.logout(self.base_url, self.access_token))

    def logout_all(self) -> Response:
        """Invalidate every access token of the current user."""
        return self.request(request.logout_all(self.base_url, self.access_token))

    async def logout_all_async(self) -> Response:
        return await self.request_async(
            request.logout_all(self.base_url, self.access_token)
        )
