from typing import Any, Optional

from httpx import Response

from .. import request
from ._base_service import BaseService


class RoomsService(BaseService):
    """Service for reading room state and history.

    Room and event IDs are passed raw (e.g. ``"!abc:matrix.org"``); they are
    percent-encoded when the request path is built.
    """

    def event(self, room_id: str, event_id: str) -> Response:
        """Get a single event by room and event ID."""
        return self.request(
            request.room_event(self.base_url, self.access_token, room_id, event_id)
        )

    async def event_async(self, room_id: str, event_id: str) -> Response:
        return await self.request_async(
            request.room_event(self.base_url, self.access_token, room_id, event_id)
        )

    def state_event(
        self, room_id: str, event_type: str, state_key: str = ""
    ) -> Response:
        """Get the content of a state event, e.g. ``m.room.name``."""
        return self.request(
            request.room_state_event(
                self.base_url, self.access_token, room_id, event_type, state_key
            )
        )

    async def state_event_async(
        self, room_id: str, event_type: str, state_key: str = ""
    ) -> Response:
        return await self.request_async(
            request.room_state_event(
                self.base_url, self.access_token, room_id, event_type, state_key
            )
        )

    def state(self, room_id: str) -> Response:
        return self.request(
            request.room_state(self.base_url, self.access_token, room_id)
        )

    async def state_async(self, room_id: str) -> Response:
        return await self.request_async(
            request.room_state(self.base_url, self.access_token, room_id)
        )

    def members(
        self, room_id: str, *, opts: Optional[dict[str, Any]] = None
    ) -> Response:
        """Get the member events of a room.

        Args:
            room_id (str): The room ID.
            opts (Optional[dict[str, Any]]): ``at``, ``membership``,
                ``not_membership``.
        """
        return self.request(
            request.room_members(self.base_url, self.access_token, room_id, opts)
        )

    async def members_async(
        self, room_id: str, *, opts: Optional[dict[str, Any]] = None
    ) -> Response:
        return await self.request_async(
            request.room_members(self.base_url, self.access_token, room_id, opts)
        )

    def joined_members(self, room_id: str) -> Response:
        return self.request(
            request.room_joined_members(self.base_url, self.access_token, room_id)
        )

    async def joined_members_async(self, room_id: str) -> Response:
        return await self.request_async(
            request.room_joined_members(self.base_url, self.access_token, room_id)
        )

    def messages(
        self,
        room_id: str,
        from_token: str,
        direction: str = "b",
        *,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        """Get a page of message and state events.

        Args:
            room_id (str): The room ID.
            from_token (str): Pagination token, e.g. ``prev_batch`` from sync.
            direction (str): ``"b"`` (backwards, default) or ``"f"``.
            opts (Optional[dict[str, Any]]): ``to``, ``limit``, ``filter``.

        Returns:
            Response: Contains ``chunk``, ``start`` and ``end``.
        """
        return self.request(
            request.room_messages(
                self.base_url, self.access_token, room_id, from_token, direction, opts
            )
        )

    async def messages_async(
        self,
        room_id: str,
        from_token: str,
        direction: str = "b",
        *,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        return await self.request_async(
            request.room_messages(
                self.base_url, self.access_token, room_id, from_token, direction, opts
            )
        )
