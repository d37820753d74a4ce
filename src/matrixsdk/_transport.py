import json
from logging import getLogger
from typing import Any, Optional, Protocol, Union

from httpx import AsyncClient, Client, HTTPError, HTTPStatusError, Response

from ._utils import RequestSpec
from ._utils.constants import HEADER_AUTHORIZATION, HEADER_USER_AGENT
from .models.errors import TransportError

BODYLESS_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "TRACE"})
USER_AGENT = "matrixsdk-python"


class Transport(Protocol):
    def do_request(self, spec: RequestSpec) -> Response: ...


class AsyncTransport(Protocol):
    async def do_request_async(self, spec: RequestSpec) -> Response: ...


def to_transport_error(error: HTTPError) -> TransportError:
    """Wrap an httpx error, extracting the Matrix error fields when available."""
    if not isinstance(error, HTTPStatusError):
        return TransportError(str(error) or type(error).__name__)

    response = error.response
    try:
        body: Any = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = response.text

    errcode: Optional[str] = None
    message: Optional[str] = None
    if isinstance(body, dict):
        errcode = body.get("errcode")
        message = body.get("error")

    return TransportError(
        f"{error.request.method} {error.request.url.path} failed",
        status_code=response.status_code,
        errcode=errcode,
        error=message,
        body=body,
    )


class HttpxTransport:
    """Sends a ``RequestSpec`` over HTTP with httpx.

    Error responses (status >= 400) and network failures are raised as
    ``TransportError``. Nothing is retried.

    Args:
        client: Sync client to use. Created on first use when omitted.
        async_client: Async client to use. Created on first use when omitted.
        timeout: Timeout in seconds for clients created by the transport.
    """

    def __init__(
        self,
        client: Optional[Client] = None,
        async_client: Optional[AsyncClient] = None,
        *,
        timeout: Union[int, float] = 30.0,
    ) -> None:
        self._logger = getLogger("matrixsdk")
        self._timeout = timeout
        self._client = client
        self._client_async = async_client
        self._owns_client = client is None
        self._owns_client_async = async_client is None

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            HEADER_USER_AGENT: USER_AGENT,
        }

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = Client(timeout=self._timeout, headers=self.default_headers)
        return self._client

    @property
    def client_async(self) -> AsyncClient:
        if self._client_async is None:
            self._client_async = AsyncClient(
                timeout=self._timeout, headers=self.default_headers
            )
        return self._client_async

    def _request_kwargs(self, spec: RequestSpec) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "params": spec.query_params or None,
            "headers": spec.headers,
        }
        if spec.method not in BODYLESS_METHODS:
            kwargs["json"] = dict(spec.body)
        return kwargs

    def _log_request(self, spec: RequestSpec) -> None:
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        if spec.query_params:
            self._logger.debug(f"PARAMS: {spec.query_params}")
        self._logger.debug(
            f"HEADERS: {[name for name, _ in spec.headers if name != HEADER_AUTHORIZATION]}"
        )

    def do_request(self, spec: RequestSpec) -> Response:
        self._log_request(spec)
        try:
            response = self.client.request(
                spec.method, spec.url, **self._request_kwargs(spec)
            )
            self._logger.debug(f"Response: {response.status_code} {spec.url}")
            response.raise_for_status()
        except HTTPError as e:
            raise to_transport_error(e) from e
        return response

    async def do_request_async(self, spec: RequestSpec) -> Response:
        self._log_request(spec)
        try:
            response = await self.client_async.request(
                spec.method, spec.url, **self._request_kwargs(spec)
            )
            self._logger.debug(f"Response: {response.status_code} {spec.url}")
            response.raise_for_status()
        except HTTPError as e:
            raise to_transport_error(e) from e
        return response

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    async def aclose(self) -> None:
        if self._owns_client_async and self._client_async is not None:
            await self._client_async.aclose()
            self._client_async = None

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
