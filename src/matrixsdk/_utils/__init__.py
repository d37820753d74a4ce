from ._auth import encode_auth, header_bearer
from ._encoding import decode_path_segment, encode_path_segment
from ._logs import setup_logging
from ._options import merge_body, merge_query, require_options, require_str
from ._request_spec import HTTP_METHODS, RequestSpec

__all__ = [
    "encode_auth",
    "header_bearer",
    "decode_path_segment",
    "encode_path_segment",
    "setup_logging",
    "merge_body",
    "merge_query",
    "require_options",
    "require_str",
    "HTTP_METHODS",
    "RequestSpec",
]
