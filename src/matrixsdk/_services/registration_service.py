from typing import Any, Optional

from httpx import Response

from .. import request
from ._base_service import BaseService


class RegistrationService(BaseService):
    """Service for account registration on the homeserver."""

    def register_guest(self, *, opts: Optional[dict[str, Any]] = None) -> Response:
        return self.request(request.register_guest(self.base_url, opts))

    async def register_guest_async(
        self, *, opts: Optional[dict[str, Any]] = None
    ) -> Response:
        return await self.request_async(request.register_guest(self.base_url, opts))

    def register_user(
        self, password: str, *, opts: Optional[dict[str, Any]] = None
    ) -> Response:
        """Register a user account using the dummy auth stage.

        Args:
            password (str): Password of the new account.
            opts (Optional[dict[str, Any]]): ``username``, ``device_id``,
                ``initial_device_display_name``, ``inhibit_login``.

        Returns:
            Response: Contains ``user_id`` and, unless ``inhibit_login`` was
            set, ``access_token``.
        """
        return self.request(request.register_user(self.base_url, password, opts))

    async def register_user_async(
        self, password: str, *, opts: Optional[dict[str, Any]] = None
    ) -> Response:
        return await self.request_async(
            request.register_user(self.base_url, password, opts)
        )

    def register_email(
        self,
        client_secret: str,
        email: str,
        send_attempt: int,
        *,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        """Ask the homeserver to send a validation token to ``email``."""
        return self.request(
            request.register_email(
                self.base_url, client_secret, email, send_attempt, opts
            )
        )

    async def register_email_async(
        self,
        client_secret: str,
        email: str,
        send_attempt: int,
        *,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        return await self.request_async(
            request.register_email(
                self.base_url, client_secret, email, send_attempt, opts
            )
        )

    def username_available(self, username: str) -> Response:
        """Check that ``username`` is available and valid."""
        return self.request(request.username_availability(self.base_url, username))

    async def username_available_async(self, username: str) -> Response:
        return await self.request_async(
            request.username_availability(self.base_url, username)
        )
