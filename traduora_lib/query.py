"""
Query front door.

Two families of queries are offered, each in a blocking and an asynchronous
flavour:

* *default model* queries (:func:`query`, :func:`query_async`) decode the
  response into the model the endpoint declares for itself,
* *custom* queries (:func:`query_custom`, :func:`query_custom_async`) decode
  into any type the caller names, e.g. a model with only a subset of the
  fields or a plain ``dict``.

Every query performs the same steps: check that the client's scope allows the
endpoint, build the request, execute it through the transport and decode the
response with :func:`traduora_lib.pipeline.process_response`.  The
asynchronous flavour only suspends while the transport executes the request.
Nothing is retried and no timeout is applied here.
"""

from typing import Any, Type, TypeVar, TYPE_CHECKING

from traduora_lib.auth import narrow_scope
from traduora_lib.pipeline import (
    Mapper,
    bare_mapper,
    build_request_with_body,
    envelope_mapper,
    process_response,
)
from traduora_lib.utils.http import AsyncClient, Client, RestClient, RestRequest

if TYPE_CHECKING:
    from traduora_lib.endpoint import DefaultModel, Endpoint

T = TypeVar("T")


def _prepare(endpoint: "Endpoint", client: RestClient) -> RestRequest:
    narrow_scope(client.access_level, endpoint.access_control)
    return build_request_with_body(endpoint, client)


def _custom_mapper(target: Any, envelope: bool) -> Mapper:
    return envelope_mapper(target) if envelope else bare_mapper(target)


def query(endpoint: "DefaultModel", client: Client) -> Any:
    """
    Perform the query against the client and return the endpoint's model.

    Raises
    ------
    InsufficientScopeError
        If the client may not call the endpoint.
    TraduoraError
        If the request cannot be prepared or sent, the server reports an
        error or the response cannot be decoded.
    """
    request = _prepare(endpoint, client)
    response = client.rest(request)
    return process_response(response, type(endpoint).map, endpoint.model)


async def query_async(endpoint: "DefaultModel", client: AsyncClient) -> Any:
    """Asynchronous counterpart of :func:`query`."""
    request = _prepare(endpoint, client)
    response = await client.rest_async(request)
    return process_response(response, type(endpoint).map, endpoint.model)


def query_custom(
    endpoint: "Endpoint",
    client: Client,
    target: Type[T],
    envelope: bool = True,
) -> T:
    """
    Perform the query against the client and decode into ``target``.

    Parameters
    ----------
    endpoint : Endpoint
        Any endpoint descriptor.
    client : Client
        A blocking client whose scope allows the endpoint.
    target : type
        Any type pydantic can validate (a model, ``dict``, ``List[...]``).
    envelope : bool, default ``True``
        Decode the value inside the ``{"data": ...}`` envelope, like the
        default model queries do.  ``False`` decodes the whole JSON body.
    """
    request = _prepare(endpoint, client)
    response = client.rest(request)
    return process_response(response, _custom_mapper(target, envelope), target)


async def query_custom_async(
    endpoint: "Endpoint",
    client: AsyncClient,
    target: Type[T],
    envelope: bool = True,
) -> T:
    """Asynchronous counterpart of :func:`query_custom`."""
    request = _prepare(endpoint, client)
    response = await client.rest_async(request)
    return process_response(response, _custom_mapper(target, envelope), target)
