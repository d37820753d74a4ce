from typing import Any, Optional

from httpx import Response

from .. import request
from ._base_service import BaseService


class SyncService(BaseService):
    def sync(
        self,
        *,
        since: Optional[str] = None,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        """Synchronise the client's state with the latest state on the server.

        Args:
            since (Optional[str]): ``next_batch`` token of a previous sync.
                An explicit ``since`` key in ``opts`` takes precedence.
            opts (Optional[dict[str, Any]]): Query parameters: ``filter``,
                ``full_state``, ``set_presence``, ``timeout``.

        Returns:
            Response: The sync payload, including ``next_batch``.

        Examples:
            ```python
            from matrixsdk import MatrixSDK

            sdk = MatrixSDK()
            batch = sdk.sync.sync(opts={"timeout": 30000}).json()["next_batch"]
            updates = sdk.sync.sync(since=batch, opts={"timeout": 30000})
            ```
        """
        return self.request(
            request.sync(self.base_url, self.access_token, self._opts(since, opts))
        )

    async def sync_async(
        self,
        *,
        since: Optional[str] = None,
        opts: Optional[dict[str, Any]] = None,
    ) -> Response:
        return await self.request_async(
            request.sync(self.base_url, self.access_token, self._opts(since, opts))
        )

    @staticmethod
    def _opts(
        since: Optional[str], opts: Optional[dict[str, Any]]
    ) -> Optional[dict[str, Any]]:
        if since is None:
            return opts
        return {"since": since, **(opts or {})}
