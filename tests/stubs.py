"""Canned Traduora responses and stub transports shared by the tests."""

import json
from typing import Any, Dict, List, Optional, Tuple

from traduora_lib.auth import Scope, Unauthenticated
from traduora_lib.utils.http import (
    AsyncClient,
    Client,
    RawResponse,
    RestRequest,
    join_url,
    prepare_headers,
)

BASE_URL = "http://localhost:8080/api/v1/"

DATES = {
    "created": "2022-03-06T10:21:33.000Z",
    "modified": "2022-03-07T08:00:00.000Z",
}

PROJECT = {
    "id": "b4d5b2f8-1f9e-4e3a-9a54-47a0c3f0b2a1",
    "name": "Traduora API bindings",
    "description": "Translations for the API bindings.",
    "localesCount": 2,
    "termsCount": 17,
    "role": "admin",
    "date": DATES,
}

TERM = {
    "id": "2b0e8a7e-8a36-4a55-9e4e-5cf1b6d3e0c4",
    "value": "hello.world",
    "labels": [],
    "date": DATES,
}

USER_INFO = {
    "id": "40379230-ced0-43b8-8b78-37c924f491a7",
    "name": "Tester",
    "email": "test@test.test",
    "numProjectsCreated": 1,
}

ACCESS_TOKEN = {
    "access_token": "eyJhbGciOiJIUzI1NiJ9.payload.signature",
    "expires_in": "86400s",
    "token_type": "bearer",
}


def to_bytes(body: Any) -> bytes:
    if body is None:
        return b""
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body).encode("utf-8")


class StubClient(Client, AsyncClient):
    """
    Client answering every request with the same canned response.

    The requests (and the headers after the scope was applied) are recorded
    in ``sent`` so tests can inspect what would have gone over the wire.
    """

    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        scope: Optional[Scope] = None,
        base_url: str = BASE_URL,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.status = status
        self.body = to_bytes(body)
        self.headers = headers or {"Content-Type": "application/json"}
        self.scope = scope if scope is not None else Unauthenticated()
        self.base_url = base_url
        self.sent: List[Tuple[RestRequest, Dict[str, str]]] = []

    @property
    def access_level(self) -> Scope:
        return self.scope

    def rest_endpoint(self, endpoint: str) -> str:
        return join_url(self.base_url, endpoint)

    def rest(self, request: RestRequest) -> RawResponse:
        headers = prepare_headers(request, self.scope)
        self.sent.append((request, headers))
        return RawResponse(status=self.status, headers=self.headers, body=self.body)

    async def rest_async(self, request: RestRequest) -> RawResponse:
        return self.rest(request)
