from typing import Any, Optional

from httpx import Response

from .. import request
from ..models.auth import AuthCredential
from ._base_service import BaseService


class AccountService(BaseService):
    """Service for managing the account owning the configured access token."""

    def change_password(
        self,
        new_password: str,
        *,
        auth: Optional[AuthCredential] = None,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        """Change the account password.

        Args:
            new_password (str): The new password.
            auth (Optional[AuthCredential]): Credential for the
                user-interactive auth stage, usually the current password.
            opts (Optional[dict[str, Any]]): Extra body fields, e.g.
                ``logout_devices``.

        Returns:
            Response: An empty JSON object on success.
        """
        return self.request(
            request.change_password(
                self.base_url, self.access_token, new_password, auth, opts
            )
        )

    async def change_password_async(
        self,
        new_password: str,
        *,
        auth: Optional[AuthCredential] = None,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        return await self.request_async(
            request.change_password(
                self.base_url, self.access_token, new_password, auth, opts
            )
        )

    def third_party_ids(self) -> Response:
        """List the third party identifiers bound to the account."""
        return self.request(request.account_3pids(self.base_url, self.access_token))

    async def third_party_ids_async(self) -> Response:
        return await self.request_async(
            request.account_3pids(self.base_url, self.access_token)
        )

    def add_third_party_id(
        self,
        client_secret: str,
        sid: str,
        *,
        auth: Optional[AuthCredential] = None,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        return self.request(
            request.account_add_3pid(
                self.base_url, self.access_token, client_secret, sid, auth, opts
            )
        )

    async def add_third_party_id_async(
        self,
        client_secret: str,
        sid: str,
        *,
        auth: Optional[AuthCredential] = None,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        return await self.request_async(
            request.account_add_3pid(
                self.base_url, self.access_token, client_secret, sid, auth, opts
            )
        )

    def whoami(self) -> Response:
        """Get the user ID (and device ID) owning the access token."""
        return self.request(request.whoami(self.base_url, self.access_token))

    async def whoami_async(self) -> Response:
        return await self.request_async(request.whoami(self.base_url, self.access_token))
