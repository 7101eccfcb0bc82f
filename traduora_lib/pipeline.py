"""
Request building and response decoding shared by every query.

Both the blocking and the asynchronous query paths use the functions of this
module; only the transport call in between differs.  Nothing here performs
I/O or logging, so a decode never suspends.

Decoding of a :class:`RawResponse` (:func:`process_response`):

1. An empty body is treated as JSON ``null``.
2. A ``2xx`` status parses the body as JSON (:class:`JsonError` on failure)
   and passes the value to the mapping function of the endpoint
   (:class:`DataTypeError` if the value does not fit the target type).
3. Any other status tries to parse the body as JSON.  Unparsable or empty
   bodies become :class:`TraduoraServiceError`; parsed bodies are classified
   by :func:`traduora_lib.exceptions.from_traduora`.
"""

from functools import lru_cache
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar, TYPE_CHECKING

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import from_json

from traduora_lib.constants import JSON_MIME_TYPE
from traduora_lib.exceptions import (
    JsonError,
    data_type,
    from_traduora,
    server_error,
)
from traduora_lib.utils.http import RawResponse, RestClient, RestRequest

if TYPE_CHECKING:
    from traduora_lib.endpoint import Endpoint

T = TypeVar("T")

Mapper = Callable[[Any], Any]

CONTENT_TYPE_HEADER = "Content-Type"


class DataEnvelope(BaseModel, Generic[T]):
    """The ``{"data": ...}`` wrapper used by most Traduora responses."""

    data: T


@lru_cache(maxsize=None)
def _cached_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def type_adapter(target: Any) -> TypeAdapter:
    try:
        return _cached_adapter(target)
    except TypeError:
        # unhashable annotations cannot be cached
        return TypeAdapter(target)


def bare_mapper(target: Any) -> Mapper:
    """Build a mapping function decoding a JSON value directly into ``target``."""
    adapter = type_adapter(target)
    return adapter.validate_python


def envelope_mapper(target: Any) -> Mapper:
    """Build a mapping function decoding ``{"data": <target>}``."""
    adapter = type_adapter(DataEnvelope[target])

    def _map(value: Any) -> Any:
        return adapter.validate_python(value).data

    return _map


def build_request_with_body(endpoint: "Endpoint", client: RestClient) -> RestRequest:
    """
    Turn an endpoint descriptor into a request for ``client``.

    Raises
    ------
    UrlParseError
        If the path of the endpoint cannot be joined with the client's URL.
    BodyError
        If the body of the endpoint cannot be serialized.
    """
    url = client.rest_endpoint(endpoint.endpoint())
    method = endpoint.method().upper()
    sensitive = bool(endpoint.sensitive)

    body = endpoint.body()
    if body is None:
        return RestRequest(method=method, url=url, sensitive=sensitive)

    mime, data = body
    return RestRequest(
        method=method,
        url=url,
        headers={CONTENT_TYPE_HEADER: mime},
        body=data,
        sensitive=sensitive,
    )


def _parse_json(body: Optional[bytes]) -> Any:
    if not body:
        return None
    # strict JSON: no NaN or Infinity, nesting depth is bounded
    return from_json(body, allow_inf_nan=False)


def process_response(response: RawResponse, mapper: Mapper, target: Any) -> Any:
    """
    Decode ``response`` into ``target`` using ``mapper``.

    Parameters
    ----------
    response : RawResponse
        The response returned by the transport.
    mapper : Callable[[Any], Any]
        Maps the parsed JSON value onto the target type; it signals a shape
        mismatch with :class:`pydantic.ValidationError`.
    target : Any
        The target type, only used to name it in :class:`DataTypeError`.

    Returns
    -------
    Any
        The decoded model.

    Raises
    ------
    JsonError, DataTypeError
        For a successful status whose body cannot be decoded.
    TraduoraServiceError, TraduoraMessageError, TraduoraObjectError,
    TraduoraUnrecognizedError
        For any non-success status.
    """
    if response.is_success:
        try:
            value = _parse_json(response.body)
        except ValueError as exc:
            raise JsonError(exc) from exc
        try:
            return mapper(value)
        except ValidationError as exc:
            raise data_type(target, exc) from exc

    if not response.body:
        raise server_error(response.status, response.body)
    try:
        value = _parse_json(response.body)
    except ValueError as exc:
        raise server_error(response.status, response.body) from exc
    raise from_traduora(value)


def json_body(payload: Any) -> Tuple[str, bytes]:
    """Serialize a pydantic payload (or any JSON compatible value)."""
    if isinstance(payload, BaseModel):
        return JSON_MIME_TYPE, payload.model_dump_json(
            by_alias=True, exclude_none=True
        ).encode("utf-8")
    return JSON_MIME_TYPE, type_adapter(type(payload)).dump_json(payload)
