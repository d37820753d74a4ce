from logging import getLogger

from httpx import Response

from .._config import Config
from .._dispatcher import Dispatcher
from .._utils import RequestSpec
from ..models.errors import AccessTokenMissingError


class BaseService:
    """Binds the configured homeserver to the request builders.

    Services build a ``RequestSpec`` from ``base_url`` and, for
    authenticated calls, ``access_token``, then pass it to the dispatcher.
    The response is returned as the transport produced it.
    """

    def __init__(self, config: Config, dispatcher: Dispatcher) -> None:
        self._logger = getLogger("matrixsdk")
        self._config = config
        self._dispatcher = dispatcher

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def access_token(self) -> str:
        if not self._config.access_token:
            raise AccessTokenMissingError()
        return self._config.access_token

    def request(self, spec: RequestSpec) -> Response:
        self._logger.debug(f"Dispatching: {spec.method} {spec.path}")
        return self._dispatcher.dispatch(spec)

    async def request_async(self, spec: RequestSpec) -> Response:
        self._logger.debug(f"Dispatching: {spec.method} {spec.path}")
        return await self._dispatcher.dispatch_async(spec)
