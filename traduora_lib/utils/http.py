"""
Transport boundary of the library.

The query pipeline never talks to an HTTP library directly.  It builds a
:class:`RestRequest`, hands it to a client implementing :class:`Client`
(blocking) or :class:`AsyncClient` (asynchronous) and receives a
:class:`RawResponse`.  Any HTTP backend can be plugged in by implementing one
of these interfaces; :mod:`traduora_lib.client` ships implementations based
on ``requests`` and ``httpx``.

The module also provides :func:`join_url`, the single place where the path of
an endpoint is combined with the API root of a client.
"""

import abc
import re
from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import urljoin, urlsplit

from traduora_lib.auth import Scope
from traduora_lib.exceptions import UrlParseError

_ILLEGAL_URL_CHARS = re.compile(r"[\x00-\x20\x7f]")


@dataclass(frozen=True)
class RestRequest:
    """
    A fully prepared request, ready to be executed by a transport.

    Attributes
    ----------
    method : str
        Upper‑case HTTP verb.
    url : str
        Absolute URL of the endpoint.
    headers : Dict[str, str]
        Request headers without the authorization header; that one is added
        by the client from its scope.
    body : bytes
        Serialized payload, empty when the endpoint has no body.
    sensitive : bool
        ``True`` if the body carries secrets and must not be logged.
    """

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    sensitive: bool = False


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and body bytes of exactly one HTTP exchange."""

    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300


def join_url(base_url: str, path: str) -> str:
    """
    Join the API root of a client with the relative path of an endpoint.

    Parameters
    ----------
    base_url : str
        Absolute ``http``/``https`` URL ending with ``/`` (e.g.
        ``"https://localhost:8080/api/v1/"``).
    path : str
        Path relative to ``base_url`` (e.g. ``"projects/42/terms"``).  A
        leading slash is ignored so the API root is always preserved.

    Returns
    -------
    str
        Absolute URL of the endpoint.

    Raises
    ------
    UrlParseError
        If the base URL is not an absolute http(s) URL or if the path is not
        a relative path.
    """
    _validate_base_url(base_url)

    if _ILLEGAL_URL_CHARS.search(path):
        raise UrlParseError(path, "endpoint path contains illegal characters")
    try:
        parts = urlsplit(path)
    except ValueError as exc:
        raise UrlParseError(path, str(exc)) from exc
    if parts.scheme or parts.netloc or path.startswith("//"):
        raise UrlParseError(path, "endpoint path must be relative")

    return urljoin(base_url, path.lstrip("/"))


def _validate_base_url(base_url: str) -> None:
    if _ILLEGAL_URL_CHARS.search(base_url):
        raise UrlParseError(base_url, "url contains illegal characters")
    try:
        parts = urlsplit(base_url)
        # accessing the port validates it
        parts.port
    except ValueError as exc:
        raise UrlParseError(base_url, str(exc)) from exc
    if parts.scheme not in ("http", "https"):
        raise UrlParseError(base_url, "relative URL without a http(s) scheme")
    if not parts.hostname:
        raise UrlParseError(base_url, "empty host")
    if not parts.path.endswith("/"):
        raise UrlParseError(base_url, "API root must end with '/'")


class RestClient(abc.ABC):
    """A client which can communicate with a Traduora instance via REST."""

    @property
    @abc.abstractmethod
    def access_level(self) -> Scope:
        """The scope (and credential) held by the client."""

    @abc.abstractmethod
    def rest_endpoint(self, endpoint: str) -> str:
        """
        Get the absolute URL of ``endpoint`` for this client.

        Raises
        ------
        UrlParseError
            If the host name cannot be joined with the endpoint path.
        """


class Client(RestClient):
    """A blocking client which can send requests to a Traduora instance."""

    @abc.abstractmethod
    def rest(self, request: RestRequest) -> RawResponse:
        """
        Perform exactly one HTTP exchange.

        Raises
        ------
        AuthError
            If the held credential cannot be turned into a header.
        ClientError
            If the request could not be sent or the response not received.
        """


class AsyncClient(RestClient):
    """An asynchronous client which can send requests to a Traduora instance."""

    @abc.abstractmethod
    async def rest_async(self, request: RestRequest) -> RawResponse:
        """Asynchronous counterpart of :meth:`Client.rest`."""


def prepare_headers(request: RestRequest, scope: Scope) -> Dict[str, str]:
    """Copy the request headers and let ``scope`` add its credential."""
    return scope.set_header(dict(request.headers))


def header_dict(headers: Optional[object]) -> Dict[str, str]:
    if not headers:
        return {}
    return {str(k): str(v) for k, v in dict(headers).items()}
