from logging import getLogger
from typing import Optional, Union

from dotenv import load_dotenv

from ._config import Config, resolve_config
from ._dispatcher import Dispatcher
from ._services import (
    AccountService,
    DiscoveryService,
    RegistrationService,
    RoomsService,
    SessionService,
    SyncService,
)
from ._transport import AsyncTransport, HttpxTransport, Transport
from ._utils import setup_logging


class MatrixSDK:
    """Entry point for talking to a Matrix homeserver.

    Args:
        base_url: Homeserver URL. Defaults to ``MATRIX_HOMESERVER_URL``.
        access_token: Access token for authenticated calls. Defaults to
            ``MATRIX_ACCESS_TOKEN``.
        transport: Collaborator that sends requests. Defaults to a new
            ``HttpxTransport``.
        debug: Log requests at DEBUG level.

    Examples:
        ```python
        from matrixsdk import MatrixSDK

        sdk = MatrixSDK(base_url="https://matrix.org", access_token="syt_...")
        me = sdk.account.whoami().json()["user_id"]
        ```
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        access_token: Optional[str] = None,
        transport: Optional[Union[Transport, AsyncTransport]] = None,
        debug: bool = False,
    ) -> None:
        load_dotenv()

        self._config = resolve_config(base_url, access_token, debug)

        setup_logging(self._config.debug)
        log = getLogger("matrixsdk")
        log.debug("CONFIG:")
        log.debug(f"{self._config.model_dump(exclude={'access_token'})}\n")

        self._transport = transport if transport is not None else HttpxTransport()
        self._dispatcher = Dispatcher(self._transport)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    @property
    def discovery(self) -> DiscoveryService:
        return DiscoveryService(self._config, self._dispatcher)

    @property
    def session(self) -> SessionService:
        return SessionService(self._config, self._dispatcher)

    @property
    def registration(self) -> RegistrationService:
        return RegistrationService(self._config, self._dispatcher)

    @property
    def account(self) -> AccountService:
        return AccountService(self._config, self._dispatcher)

    @property
    def sync(self) -> SyncService:
        return SyncService(self._config, self._dispatcher)

    @property
    def rooms(self) -> RoomsService:
        return RoomsService(self._config, self._dispatcher)
