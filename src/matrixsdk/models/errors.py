from typing import Any, Optional


class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="Homeserver URL required. Pass base_url or set the MATRIX_HOMESERVER_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)


class AccessTokenMissingError(Exception):
    def __init__(
        self,
        message="Authentication required. Log in first or set the MATRIX_ACCESS_TOKEN environment variable to a valid access token.",
    ):
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(ValueError):
    """Raised when a request builder receives a missing or malformed argument.

    This is a caller contract violation: it is raised synchronously while the
    request is being built, before anything reaches the transport.
    """

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        self.message = f"Invalid argument '{argument}': {reason}"
        super().__init__(self.message)


class TransportError(Exception):
    """Raised by a transport when a request could not be completed.

    Covers both network failures (``status_code`` is ``None``) and error
    responses from the homeserver. For the latter, the Matrix ``errcode`` and
    ``error`` fields are extracted from the JSON body when present.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        errcode: Optional[str] = None,
        error: Optional[str] = None,
        body: Any = None,
    ):
        self.status_code = status_code
        self.errcode = errcode
        self.error = error
        self.body = body
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        details = " ".join(x for x in (self.errcode, self.error) if x)
        if details:
            return f"{self.message} [{self.status_code}] {details}"
        return f"{self.message} [{self.status_code}]"
