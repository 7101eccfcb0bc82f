import asyncio
import json
from urllib.parse import urlsplit

import httpx
import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from traduora_lib import Login
from traduora_lib import client as client_module
from traduora_lib.auth import Authenticated, Unauthenticated
from traduora_lib.client import AsyncTraduora, Traduora, TraduoraBuilder
from traduora_lib.exceptions import (
    AuthError,
    ClientError,
    TraduoraMessageError,
    UrlParseError,
)
from traduora_lib.services.projects import CreateProject
from traduora_lib.services.users import Me

from stubs import ACCESS_TOKEN, PROJECT, USER_INFO, to_bytes

HOST = "localhost:8080"


class FakeAdapter(BaseAdapter):
    """
    Transport adapter answering from a routing table instead of the network.

    ``routes`` maps ``(method, path)`` to ``(status, body)``; unknown routes
    answer with ``404``.  Sent requests and the keyword arguments ``requests``
    passed along are kept in ``sent``.
    """

    def __init__(self, routes=None, error=None):
        super().__init__()
        self.routes = routes or {}
        self.error = error
        self.sent = []

    def send(self, request, **kwargs):
        self.sent.append((request, kwargs))
        if self.error is not None:
            raise self.error

        path = urlsplit(request.url).path
        status, body = self.routes.get(
            (request.method, path), (404, {"message": "Not Found"})
        )

        response = requests.Response()
        response.status_code = status
        response._content = to_bytes(body)
        response.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        response.url = request.url
        response.request = request
        response.encoding = "utf-8"
        return response

    def close(self):
        pass


def session_with(adapter):
    session = requests.Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


# -------------------------------------------------------------------------- #
# blocking client
# -------------------------------------------------------------------------- #
def test_base_url():
    assert Traduora(HOST, use_http=True).rest_url == "http://localhost:8080/api/v1/"
    assert Traduora(HOST).rest_url == "https://localhost:8080/api/v1/"
    client = Traduora(" localhost:8080/ ", use_http=True)
    assert client.rest_endpoint("users/me") == "http://localhost:8080/api/v1/users/me"


@pytest.mark.parametrize("host", ["", "localhost:80x", "local host"])
def test_malformed_host(host):
    with pytest.raises(UrlParseError):
        Traduora(host)


def test_default_scope_is_unauthenticated():
    client = Traduora(HOST)
    assert client.access_level == Unauthenticated()
    assert "Unauthenticated" in repr(client)


def test_with_scope_keeps_the_session(auth_scope):
    client = Traduora(HOST, use_http=True)
    authed = client.with_scope(auth_scope)

    assert authed.access_level is auth_scope
    assert authed.session is client.session
    assert authed.rest_url == client.rest_url
    assert auth_scope.token not in repr(authed)


def test_query_over_requests(auth_scope):
    adapter = FakeAdapter({("GET", "/api/v1/users/me"): (200, {"data": USER_INFO})})
    client = Traduora(
        HOST,
        scope=auth_scope,
        use_http=True,
        validate_certs=False,
        timeout=2.5,
        session=session_with(adapter),
    )

    user = Me().query(client)

    assert user.name == "Tester"
    request, kwargs = adapter.sent[0]
    assert request.method == "GET"
    assert request.url == "http://localhost:8080/api/v1/users/me"
    assert request.headers["Authorization"] == f"Bearer {auth_scope.token}"
    assert kwargs["verify"] is False
    assert kwargs["timeout"] == 2.5


def test_body_and_content_type_are_sent(auth_scope):
    adapter = FakeAdapter({("POST", "/api/v1/projects"): (201, {"data": PROJECT})})
    client = Traduora(
        HOST, scope=auth_scope, use_http=True, session=session_with(adapter)
    )

    project = CreateProject("Traduora API bindings", "Translations").query(client)

    assert project.terms_count == 17
    request, _ = adapter.sent[0]
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.body) == {
        "name": "Traduora API bindings",
        "description": "Translations",
    }


def test_server_error_over_requests(auth_scope):
    client = Traduora(
        HOST, scope=auth_scope, use_http=True, session=session_with(FakeAdapter())
    )
    with pytest.raises(TraduoraMessageError) as exc_info:
        Me().query(client)
    assert exc_info.value.msg == "Not Found"


def test_transport_failure_is_a_client_error(auth_scope):
    adapter = FakeAdapter(error=requests.ConnectionError("connection refused"))
    client = Traduora(
        HOST, scope=auth_scope, use_http=True, session=session_with(adapter)
    )
    with pytest.raises(ClientError) as exc_info:
        Me().query(client)
    assert isinstance(exc_info.value.source, requests.ConnectionError)


def test_invalid_token_is_an_auth_error():
    adapter = FakeAdapter()
    client = Traduora(
        HOST,
        scope=Authenticated("broken\ntoken"),
        use_http=True,
        session=session_with(adapter),
    )
    with pytest.raises(AuthError):
        Me().query(client)
    assert adapter.sent == []


def test_context_manager_closes_the_session(monkeypatch):
    closed = []
    session = requests.Session()
    monkeypatch.setattr(session, "close", lambda: closed.append(True))

    with Traduora(HOST, session=session):
        pass

    assert closed == [True]


# -------------------------------------------------------------------------- #
# logging
# -------------------------------------------------------------------------- #
def test_requests_are_logged(auth_scope, debug_logs):
    adapter = FakeAdapter({("POST", "/api/v1/projects"): (201, {"data": PROJECT})})
    client = Traduora(
        HOST, scope=auth_scope, use_http=True, session=session_with(adapter)
    )
    CreateProject("visible-name", "d").query(client)

    assert "POST http://localhost:8080/api/v1/projects" in debug_logs.text
    assert "visible-name" in debug_logs.text
    assert "HTTP 201" in debug_logs.text


def test_sensitive_payload_is_not_logged(debug_logs):
    adapter = FakeAdapter({("POST", "/api/v1/auth/token"): (201, ACCESS_TOKEN)})
    client = Traduora(HOST, use_http=True, session=session_with(adapter))

    Login.password("test@test.test", "super-secret").query(client)

    assert "POST http://localhost:8080/api/v1/auth/token" in debug_logs.text
    assert "super-secret" not in debug_logs.text


# -------------------------------------------------------------------------- #
# builder
# -------------------------------------------------------------------------- #
def test_builder_without_credentials():
    client = TraduoraBuilder(HOST).use_http().build()
    assert isinstance(client, Traduora)
    assert client.access_level == Unauthenticated()
    assert client.rest_url == "http://localhost:8080/api/v1/"


def test_builder_with_access_token():
    client = TraduoraBuilder(HOST).with_access_token("abc").build()
    assert client.access_level == Authenticated("abc")


def test_builder_login():
    adapter = FakeAdapter(
        {
            ("POST", "/api/v1/auth/token"): (200, ACCESS_TOKEN),
            ("GET", "/api/v1/users/me"): (200, {"data": USER_INFO}),
        }
    )
    client = (
        TraduoraBuilder(HOST)
        .use_http(True)
        .validate_certs(False)
        .session(session_with(adapter))
        .authenticate(Login.password("test@test.test", "12345678"))
        .build()
    )

    assert client.access_level == Authenticated(ACCESS_TOKEN["access_token"])
    Me().query(client)

    login_request, _ = adapter.sent[0]
    assert "Authorization" not in login_request.headers
    assert json.loads(login_request.body) == {
        "grant_type": "password",
        "username": "test@test.test",
        "password": "12345678",
    }
    me_request, _ = adapter.sent[1]
    assert me_request.headers["Authorization"] == (
        f"Bearer {ACCESS_TOKEN['access_token']}"
    )


def test_builder_login_failure_keeps_an_injected_session(monkeypatch):
    adapter = FakeAdapter(
        {("POST", "/api/v1/auth/token"): (401, {"message": "Unauthorized"})}
    )
    session = session_with(adapter)
    closed = []
    monkeypatch.setattr(session, "close", lambda: closed.append(True))
    builder = (
        TraduoraBuilder(HOST)
        .use_http()
        .session(session)
        .authenticate(Login.password("test@test.test", "wrong"))
    )
    with pytest.raises(TraduoraMessageError):
        builder.build()
    assert closed == []


def test_builder_login_failure_closes_its_own_session(monkeypatch):
    adapter = FakeAdapter(
        {("POST", "/api/v1/auth/token"): (401, {"message": "Unauthorized"})}
    )
    session = session_with(adapter)
    closed = []
    monkeypatch.setattr(session, "close", lambda: closed.append(True))
    monkeypatch.setattr(client_module.requests, "Session", lambda: session)

    builder = (
        TraduoraBuilder(HOST)
        .use_http()
        .authenticate(Login.password("test@test.test", "wrong"))
    )
    with pytest.raises(TraduoraMessageError):
        builder.build()
    assert closed == [True]


def test_builder_rejects_malformed_host():
    with pytest.raises(UrlParseError):
        TraduoraBuilder("localhost:port").build()


def test_builder_reads_environment(monkeypatch):
    monkeypatch.setattr(client_module, "USE_HTTP", True)
    monkeypatch.setattr(client_module, "DEFAULT_TIMEOUT", 0.0)

    builder = TraduoraBuilder(HOST)
    assert builder.build().rest_url.startswith("http://")
    assert builder._timeout is None


# -------------------------------------------------------------------------- #
# asynchronous client
# -------------------------------------------------------------------------- #
def mock_http_client(routes, recorded):
    def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        status, body = routes.get(
            (request.method, request.url.path), (404, {"message": "Not Found"})
        )
        return httpx.Response(status, content=to_bytes(body))

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_async_query_over_httpx(auth_scope):
    recorded = []
    http_client = mock_http_client(
        {("GET", "/api/v1/users/me"): (200, {"data": USER_INFO})}, recorded
    )

    async def run():
        async with AsyncTraduora(
            HOST, scope=auth_scope, use_http=True, http_client=http_client
        ) as client:
            return await Me().query_async(client)

    user = asyncio.run(run())

    assert user.email == "test@test.test"
    assert str(recorded[0].url) == "http://localhost:8080/api/v1/users/me"
    assert recorded[0].headers["Authorization"] == f"Bearer {auth_scope.token}"


def test_async_builder_login():
    recorded = []
    http_client = mock_http_client(
        {
            ("POST", "/api/v1/auth/token"): (200, ACCESS_TOKEN),
            ("GET", "/api/v1/users/me"): (200, {"data": USER_INFO}),
        },
        recorded,
    )

    async def run():
        client = await (
            TraduoraBuilder(HOST)
            .use_http()
            .http_client(http_client)
            .authenticate(Login.password("test@test.test", "12345678"))
            .build_async()
        )
        async with client:
            return client, await Me().query_async(client)

    client, user = asyncio.run(run())

    assert isinstance(client, AsyncTraduora)
    assert client.access_level == Authenticated(ACCESS_TOKEN["access_token"])
    assert user.num_projects_created == 1
    assert json.loads(recorded[0].content)["grant_type"] == "password"


def test_async_transport_failure_is_a_client_error(auth_scope):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    async def run():
        async with AsyncTraduora(
            HOST, scope=auth_scope, use_http=True, http_client=http_client
        ) as client:
            return await Me().query_async(client)

    with pytest.raises(ClientError) as exc_info:
        asyncio.run(run())
    assert isinstance(exc_info.value.source, httpx.ConnectError)


def test_async_builder_login_failure_closes_its_own_client(monkeypatch):
    created = []
    real_async_client = httpx.AsyncClient

    def handler(request):
        return httpx.Response(401, json={"message": "Unauthorized"})

    def make_client(**kwargs):
        http_client = real_async_client(transport=httpx.MockTransport(handler))
        created.append(http_client)
        return http_client

    monkeypatch.setattr(client_module.httpx, "AsyncClient", make_client)
    builder = (
        TraduoraBuilder(HOST)
        .use_http()
        .authenticate(Login.password("test@test.test", "wrong"))
    )

    with pytest.raises(TraduoraMessageError):
        asyncio.run(builder.build_async())
    assert len(created) == 1
    assert created[0].is_closed


def test_async_builder_login_failure_keeps_an_injected_client():
    def handler(request):
        return httpx.Response(401, json={"message": "Unauthorized"})

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    builder = (
        TraduoraBuilder(HOST)
        .use_http()
        .http_client(http_client)
        .authenticate(Login.password("test@test.test", "wrong"))
    )

    async def run():
        try:
            await builder.build_async()
        finally:
            assert not http_client.is_closed
            await http_client.aclose()

    with pytest.raises(TraduoraMessageError):
        asyncio.run(run())
