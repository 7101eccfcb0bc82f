"""
Custom exception hierarchy for the Traduora client library.

All public exceptions inherit from :class:`TraduoraError`, allowing callers
to catch a single base class for any failure of a query while still being
able to differentiate the specific cause when needed.  The causes form a
closed set:

* local failures before anything is sent (:class:`UrlParseError`,
  :class:`AuthError`, :class:`BodyError`),
* transport failures (:class:`ClientError`),
* decoding failures of a successful response (:class:`JsonError`,
  :class:`DataTypeError`),
* failures reported by the server (:class:`TraduoraMessageError`,
  :class:`TraduoraObjectError`, :class:`TraduoraUnrecognizedError`,
  :class:`TraduoraServiceError`).

The module level helpers :func:`server_error`, :func:`from_traduora` and
:func:`data_type` build the proper exception from raw response data.
"""

from typing import Any, Optional


class TraduoraError(Exception):
    """Base exception for all Traduora‑client errors."""

    pass


class UrlParseError(TraduoraError):
    """Raised when the base url or the endpoint path cannot be joined."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"failed to parse url {url!r}: {reason}")
        self.url = url
        self.reason = reason


class AuthError(TraduoraError):
    """Raised when the access token cannot be used as a header value."""

    def __init__(self, reason: str):
        super().__init__(f"header value error: {reason}")
        self.reason = reason


class BodyError(TraduoraError):
    """Raised when the request body of an endpoint cannot be serialized."""

    def __init__(self, source: Exception):
        super().__init__(f"failed to create request body: {source}")
        self.source = source


class ClientError(TraduoraError):
    """Raised when the transport fails to communicate with the server."""

    def __init__(self, source: Exception):
        super().__init__(f"client error: {source}")
        self.source = source


class JsonError(TraduoraError):
    """Raised when a successful response does not contain valid JSON."""

    def __init__(self, source: Exception):
        super().__init__(f"could not parse JSON response: {source}")
        self.source = source


class DataTypeError(TraduoraError):
    """
    Raised when valid JSON does not match the requested model.

    Attributes
    ----------
    source : Exception
        The validation error reported by pydantic.
    typename : str
        Readable name of the type that could not be deserialized.
    """

    def __init__(self, source: Exception, typename: str):
        super().__init__(f"could not parse {typename} data from JSON: {source}")
        self.source = source
        self.typename = typename


class TraduoraMessageError(TraduoraError):
    """Raised when Traduora returns an error message."""

    def __init__(self, msg: str):
        super().__init__(f"traduora server error: {msg}")
        self.msg = msg


class TraduoraObjectError(TraduoraError):
    """Raised when Traduora returns a structured error object."""

    def __init__(self, obj: Any):
        super().__init__(f"traduora server error: {obj!r}")
        self.obj = obj


class TraduoraUnrecognizedError(TraduoraError):
    """Raised when Traduora returns an HTTP error with unrecognized JSON."""

    def __init__(self, obj: Any):
        super().__init__(f"traduora server error: {obj!r}")
        self.obj = obj


class TraduoraServiceError(TraduoraError):
    """Raised when Traduora returns an HTTP error without JSON information."""

    def __init__(self, status: int, data: bytes):
        super().__init__(f"traduora internal server error {status}")
        self.status = status
        self.data = data


class InsufficientScopeError(TraduoraError, TypeError):
    """
    Raised when a client tries to call an endpoint its scope does not allow.

    This is a programming error (e.g. calling an authenticated endpoint with
    an unauthenticated client) detected before any request is built.
    """

    pass


def server_error(status: int, body: Optional[bytes]) -> TraduoraServiceError:
    return TraduoraServiceError(status=status, data=bytes(body or b""))


def from_traduora(value: Any) -> TraduoraError:
    """
    Classify a JSON error body returned by Traduora.

    The message is looked up under ``message`` first and ``error`` second
    (the legacy key).  A string message yields
    :class:`TraduoraMessageError`, any other value
    :class:`TraduoraObjectError`.  Without either key the whole body is
    wrapped in :class:`TraduoraUnrecognizedError`.
    """
    if isinstance(value, dict):
        for key in ("message", "error"):
            if key in value:
                error_value = value[key]
                if isinstance(error_value, str):
                    return TraduoraMessageError(msg=error_value)
                return TraduoraObjectError(obj=error_value)
    return TraduoraUnrecognizedError(obj=value)


def type_name(target: Any) -> str:
    if target is None or target is type(None):
        return "None"
    if isinstance(target, type):
        return f"{target.__module__}.{target.__qualname__}"
    return repr(target)


def data_type(target: Any, source: Exception) -> DataTypeError:
    return DataTypeError(source=source, typename=type_name(target))
