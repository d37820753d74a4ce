"""Python client for the Matrix Client-Server API.

``matrixsdk.request`` builds transport-agnostic ``RequestSpec`` values, one
function per operation. ``MatrixSDK`` binds a homeserver URL and access
token to those builders and sends the requests through a transport.
"""

from . import request
from ._config import Config, resolve_config
from ._dispatcher import Dispatcher
from ._matrix_sdk import MatrixSDK
from ._transport import AsyncTransport, HttpxTransport, Transport
from ._utils import RequestSpec, decode_path_segment, encode_auth, encode_path_segment
from .models import (
    AuthCredential,
    Dummy,
    InvalidArgumentError,
    Token,
    TransportError,
    UserPassword,
)

__all__ = [
    "request",
    "Config",
    "resolve_config",
    "Dispatcher",
    "MatrixSDK",
    "AsyncTransport",
    "HttpxTransport",
    "Transport",
    "RequestSpec",
    "decode_path_segment",
    "encode_auth",
    "encode_path_segment",
    "AuthCredential",
    "Dummy",
    "InvalidArgumentError",
    "Token",
    "TransportError",
    "UserPassword",
]
