"""
Concrete clients for a Traduora instance.

:class:`Traduora` sends requests with a ``requests.Session`` and implements
the blocking :class:`~traduora_lib.utils.http.Client` interface,
:class:`AsyncTraduora` uses an ``httpx.AsyncClient`` and implements
:class:`~traduora_lib.utils.http.AsyncClient`.  Both hold an immutable base
URL (``{scheme}://{host}/api/v1/``) and the scope they were built with, so a
single instance can be shared between threads or tasks.

Clients are usually created with :class:`TraduoraBuilder`::

    client = (
        TraduoraBuilder("localhost:8080")
        .use_http(True)
        .authenticate(Login.password("user@mail.example", "secret"))
        .build()
    )
    me = Me().query(client)
"""

import logging
from typing import Optional

import httpx
import requests

from traduora_lib.auth import Authenticated, Scope, Unauthenticated
from traduora_lib.constants import (
    API_ROOT,
    DEFAULT_TIMEOUT,
    USE_HTTP,
    VALIDATE_CERTS,
)
from traduora_lib.exceptions import ClientError
from traduora_lib.services.auth import Token
from traduora_lib.utils.http import (
    AsyncClient,
    Client,
    RawResponse,
    RestRequest,
    header_dict,
    join_url,
    prepare_headers,
)


class _TraduoraBase:
    """
    State shared by the blocking and the asynchronous client.

    Parameters
    ----------
    host : str
        Host (and optional port) of the Traduora instance, e.g.
        ``"localhost:8080"``.
    scope : Optional[Scope]
        Access level of the client; ``Unauthenticated`` when omitted.
    use_http : bool
        Use plain ``http`` instead of ``https``.
    validate_certs : bool
        Validate TLS certificates; disable for self‑signed certificates.
    timeout : Optional[float]
        Timeout in seconds forwarded to the transport; ``None`` waits as long
        as the transport does.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is used.
    """

    def __init__(
        self,
        host: str,
        scope: Optional[Scope] = None,
        use_http: bool = USE_HTTP,
        validate_certs: bool = VALIDATE_CERTS,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        protocol = "http" if use_http else "https"
        self._rest_url = f"{protocol}://{host.strip().rstrip('/')}/{API_ROOT}"
        # fail early on a malformed host
        join_url(self._rest_url, "")

        self._scope = scope if scope is not None else Unauthenticated()
        self._use_http = use_http
        self._validate_certs = validate_certs
        self._timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

    @property
    def rest_url(self) -> str:
        return self._rest_url

    @property
    def access_level(self) -> Scope:
        return self._scope

    @property
    def validate_certs(self) -> bool:
        return self._validate_certs

    def rest_endpoint(self, endpoint: str) -> str:
        return join_url(self._rest_url, endpoint)

    def _log_request(self, request: RestRequest) -> None:
        if request.body and not request.sensitive:
            self.logger.debug(
                "%s %s | payload=%s",
                request.method,
                request.url,
                request.body.decode("utf-8", errors="replace"),
            )
        else:
            self.logger.debug("%s %s", request.method, request.url)

    def _log_response(self, request: RestRequest, response: RawResponse) -> None:
        self.logger.debug(
            "%s %s -> HTTP %d (%d bytes)",
            request.method,
            request.url,
            response.status,
            len(response.body),
        )

    def __repr__(self):
        return (
            f"{type(self).__name__}(rest_url={self._rest_url!r}, "
            f"access_level={type(self._scope).__name__})"
        )


class Traduora(_TraduoraBase, Client):
    """
    Blocking Traduora client based on ``requests``.

    Parameters
    ----------
    session : Optional[requests.Session]
        Session used to send the requests; a new one is created when omitted.
        Remaining parameters are described in :class:`_TraduoraBase`.
    """

    def __init__(
        self,
        host: str,
        scope: Optional[Scope] = None,
        use_http: bool = USE_HTTP,
        validate_certs: bool = VALIDATE_CERTS,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(
            host=host,
            scope=scope,
            use_http=use_http,
            validate_certs=validate_certs,
            timeout=timeout,
            logger=logger,
        )
        self._host = host
        self.session = session if session is not None else requests.Session()

    def with_scope(self, scope: Scope) -> "Traduora":
        """Return a client for the same instance and session holding ``scope``."""
        return Traduora(
            host=self._host,
            scope=scope,
            use_http=self._use_http,
            validate_certs=self._validate_certs,
            timeout=self._timeout,
            session=self.session,
            logger=self.logger,
        )

    def rest(self, request: RestRequest) -> RawResponse:
        headers = prepare_headers(request, self._scope)
        self._log_request(request)
        try:
            resp = self.session.request(
                request.method,
                request.url,
                headers=headers,
                data=request.body or None,
                timeout=self._timeout,
                verify=self._validate_certs,
            )
        except requests.RequestException as exc:
            raise ClientError(exc) from exc

        response = RawResponse(
            status=resp.status_code,
            headers=header_dict(resp.headers),
            body=resp.content or b"",
        )
        self._log_response(request, response)
        return response

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Traduora":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncTraduora(_TraduoraBase, AsyncClient):
    """
    Asynchronous Traduora client based on ``httpx``.

    Parameters
    ----------
    http_client : Optional[httpx.AsyncClient]
        Client used to send the requests; a new one honouring
        ``validate_certs`` and ``timeout`` is created when omitted.
        Remaining parameters are described in :class:`_TraduoraBase`.
    """

    def __init__(
        self,
        host: str,
        scope: Optional[Scope] = None,
        use_http: bool = USE_HTTP,
        validate_certs: bool = VALIDATE_CERTS,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(
            host=host,
            scope=scope,
            use_http=use_http,
            validate_certs=validate_certs,
            timeout=timeout,
            logger=logger,
        )
        self._host = host
        if http_client is None:
            http_client = httpx.AsyncClient(
                verify=validate_certs,
                timeout=httpx.Timeout(timeout),
            )
        self.http_client = http_client

    def with_scope(self, scope: Scope) -> "AsyncTraduora":
        return AsyncTraduora(
            host=self._host,
            scope=scope,
            use_http=self._use_http,
            validate_certs=self._validate_certs,
            timeout=self._timeout,
            http_client=self.http_client,
            logger=self.logger,
        )

    async def rest_async(self, request: RestRequest) -> RawResponse:
        headers = prepare_headers(request, self._scope)
        self._log_request(request)
        try:
            resp = await self.http_client.request(
                request.method,
                request.url,
                headers=headers,
                content=request.body or None,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ClientError(exc) from exc

        response = RawResponse(
            status=resp.status_code,
            headers=header_dict(resp.headers),
            body=resp.content or b"",
        )
        self._log_response(request, response)
        return response

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> "AsyncTraduora":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


class TraduoraBuilder:
    """
    Builder for :class:`Traduora` and :class:`AsyncTraduora`.

    Defaults for the transport options are read from the environment (see
    :mod:`traduora_lib.constants`).  The credential is either a login
    (:meth:`authenticate`), exchanged for an access token while building, or
    a previously obtained token (:meth:`with_access_token`).  Without a
    credential the built client is :class:`Unauthenticated`.
    """

    def __init__(self, host: str) -> None:
        self._host = host
        self._use_http = USE_HTTP
        self._validate_certs = VALIDATE_CERTS
        self._timeout = DEFAULT_TIMEOUT or None
        self._login: Optional[Token] = None
        self._token: Optional[str] = None
        self._session: Optional[requests.Session] = None
        self._http_client: Optional[httpx.AsyncClient] = None
        self._logger: Optional[logging.Logger] = None

    # ------------------------------------------------------------------ #
    def use_http(self, value: bool = True) -> "TraduoraBuilder":
        self._use_http = value
        return self

    def validate_certs(self, value: bool = True) -> "TraduoraBuilder":
        self._validate_certs = value
        return self

    def timeout(self, seconds: Optional[float]) -> "TraduoraBuilder":
        self._timeout = seconds or None
        return self

    def authenticate(self, login: Token) -> "TraduoraBuilder":
        self._login = login
        self._token = None
        return self

    def with_access_token(self, token: str) -> "TraduoraBuilder":
        self._token = token
        self._login = None
        return self

    def session(self, session: requests.Session) -> "TraduoraBuilder":
        self._session = session
        return self

    def http_client(self, http_client: httpx.AsyncClient) -> "TraduoraBuilder":
        self._http_client = http_client
        return self

    def logger(self, logger: logging.Logger) -> "TraduoraBuilder":
        self._logger = logger
        return self

    # ------------------------------------------------------------------ #
    def build(self) -> Traduora:
        """
        Build a blocking client.

        Raises
        ------
        UrlParseError
            If the host does not form a valid URL.
        TraduoraError
            If the login exchange fails.
        """
        client = Traduora(
            host=self._host,
            use_http=self._use_http,
            validate_certs=self._validate_certs,
            timeout=self._timeout,
            session=self._session,
            logger=self._logger,
        )
        if self._login is not None:
            try:
                access_token = self._login.query(client)
            except BaseException:
                if self._session is None:
                    client.close()
                raise
            return client.with_scope(Authenticated.from_access_token(access_token))
        if self._token is not None:
            return client.with_scope(Authenticated(self._token))
        return client

    async def build_async(self) -> AsyncTraduora:
        """Asynchronous counterpart of :meth:`build`."""
        client = AsyncTraduora(
            host=self._host,
            use_http=self._use_http,
            validate_certs=self._validate_certs,
            timeout=self._timeout,
            http_client=self._http_client,
            logger=self._logger,
        )
        if self._login is not None:
            try:
                access_token = await self._login.query_async(client)
            except BaseException:
                if self._http_client is None:
                    await client.aclose()
                raise
            return client.with_scope(Authenticated.from_access_token(access_token))
        if self._token is not None:
            return client.with_scope(Authenticated(self._token))
        return client
