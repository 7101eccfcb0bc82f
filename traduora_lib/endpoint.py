"""
Endpoint descriptors.

Every remote operation is described by a small immutable object derived from
:class:`Endpoint`.  The descriptor only knows *what* to send:

* ``access_control`` – the scope a client needs to call the endpoint,
* :meth:`Endpoint.method` – the HTTP verb,
* :meth:`Endpoint.endpoint` – the path relative to the API root (the
  descriptor interpolates its identifiers),
* :meth:`Endpoint.body` – an optional ``(content type, bytes)`` pair,
* ``sensitive`` – the body carries secrets and must not be logged.

Descriptors which also derive from :class:`DefaultModel` declare the type
their response decodes into and can be queried with ``endpoint.query(client)``.
"""

import abc
from typing import Any, ClassVar, Optional, Tuple, Type, TypeVar

from pydantic_core import PydanticSerializationError

from traduora_lib import query as _query
from traduora_lib.auth import Scope, Unauthenticated
from traduora_lib.exceptions import BodyError
from traduora_lib.pipeline import bare_mapper, envelope_mapper, json_body
from traduora_lib.utils.http import AsyncClient, Client

T = TypeVar("T")


class Endpoint(abc.ABC):
    """Information required to call a single REST API endpoint."""

    # Scope the client must be able to narrow its own scope to
    access_control: ClassVar[Type[Scope]] = Unauthenticated

    # Request body contains secrets (passwords, tokens)
    sensitive: ClassVar[bool] = False

    @abc.abstractmethod
    def method(self) -> str:
        """The HTTP method to use for the endpoint."""

    @abc.abstractmethod
    def endpoint(self) -> str:
        """The path of the endpoint, relative to ``/api/v1/``."""

    def body(self) -> Optional[Tuple[str, bytes]]:
        """
        The body for the endpoint.

        Returns
        -------
        Optional[Tuple[str, bytes]]
            The ``Content-Type`` of the data and the data itself, or ``None``
            when the request has no body.

        Raises
        ------
        BodyError
            If the body cannot be serialized.
        """
        return None

    def query_custom(
        self, client: Client, target: Type[T], envelope: bool = True
    ) -> T:
        return _query.query_custom(self, client, target, envelope=envelope)

    async def query_custom_async(
        self, client: AsyncClient, target: Type[T], envelope: bool = True
    ) -> T:
        return await _query.query_custom_async(
            self, client, target, envelope=envelope
        )


class JsonBodyMixin:
    """
    Send the result of :meth:`payload` as an ``application/json`` body.

    ``payload`` usually returns a pydantic model; ``None`` values are left
    out of the serialized body.
    """

    def payload(self) -> Any:
        raise NotImplementedError

    def body(self) -> Optional[Tuple[str, bytes]]:
        try:
            return json_body(self.payload())
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise BodyError(exc) from exc


class DefaultModel(Endpoint):
    """
    Endpoint with a canonical response model.

    ``model`` is any type pydantic can validate.  :meth:`map` turns the
    parsed JSON response into ``model``; by default the model is expected
    inside a ``{"data": ...}`` envelope which is how most Traduora endpoints
    answer.
    """

    model: ClassVar[Any] = None

    @classmethod
    def map(cls, data: Any) -> Any:
        return envelope_mapper(cls.model)(data)

    def query(self, client: Client) -> Any:
        """
        Perform the query against the client.

        Raises
        ------
        TraduoraError
            If the request fails to be prepared or sent, the server returns
            a non-success status or the JSON fails to deserialize.
        """
        return _query.query(self, client)

    async def query_async(self, client: AsyncClient) -> Any:
        """Perform the query against the client asynchronously."""
        return await _query.query_async(self, client)


class BareModel(DefaultModel):
    """Endpoint whose response is not wrapped in a ``data`` envelope."""

    @classmethod
    def map(cls, data: Any) -> Any:
        return bare_mapper(cls.model)(data)
