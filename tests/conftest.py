import logging

import pytest

from traduora_lib.auth import Authenticated

from stubs import StubClient


@pytest.fixture
def token():
    return "0123456789abcdef"


@pytest.fixture
def auth_scope(token):
    return Authenticated(token)


@pytest.fixture
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="traduora_lib")
    return caplog


@pytest.fixture
def stub_client():
    return StubClient
