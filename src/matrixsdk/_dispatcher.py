from typing import Any, Union

from httpx import Response

from ._transport import AsyncTransport, Transport
from ._utils import RequestSpec


def _supports(transport: Any, method: str) -> bool:
    return callable(getattr(transport, method, None))


class Dispatcher:
    """Hands a ``RequestSpec`` to the transport given at construction.

    The request is passed as is and whatever the transport returns or raises
    reaches the caller unchanged.
    """

    def __init__(self, transport: Union[Transport, AsyncTransport]) -> None:
        if not (
            _supports(transport, "do_request")
            or _supports(transport, "do_request_async")
        ):
            raise TypeError(
                "transport must provide do_request() or do_request_async()"
            )
        self._transport = transport

    @property
    def transport(self) -> Union[Transport, AsyncTransport]:
        return self._transport

    def dispatch(self, spec: RequestSpec) -> Response:
        if not _supports(self._transport, "do_request"):
            raise TypeError(
                f"{type(self._transport).__name__} does not support synchronous requests"
            )
        return self._transport.do_request(spec)  # type: ignore[union-attr]

    async def dispatch_async(self, spec: RequestSpec) -> Response:
        if not _supports(self._transport, "do_request_async"):
            raise TypeError(
                f"{type(self._transport).__name__} does not support asynchronous requests"
            )
        return await self._transport.do_request_async(spec)  # type: ignore[union-attr]
