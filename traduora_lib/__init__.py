from traduora_lib.auth import Authenticated, Scope, Unauthenticated
from traduora_lib.client import AsyncTraduora, Traduora, TraduoraBuilder
from traduora_lib.endpoint import BareModel, DefaultModel, Endpoint, JsonBodyMixin
from traduora_lib.services.auth import Token
from traduora_lib.utils.http import (
    AsyncClient,
    Client,
    RawResponse,
    RestClient,
    RestRequest,
)
from traduora_lib.exceptions import (
    TraduoraError,
    UrlParseError,
    AuthError,
    BodyError,
    ClientError,
    JsonError,
    DataTypeError,
    TraduoraMessageError,
    TraduoraObjectError,
    TraduoraUnrecognizedError,
    TraduoraServiceError,
    InsufficientScopeError,
)

# Shorter name of the token endpoint used when building a client
Login = Token

__all__ = [
    "Login",
    "Traduora",
    "AsyncTraduora",
    "TraduoraBuilder",
    "Scope",
    "Authenticated",
    "Unauthenticated",
    "Endpoint",
    "DefaultModel",
    "BareModel",
    "JsonBodyMixin",
    "RestClient",
    "Client",
    "AsyncClient",
    "RestRequest",
    "RawResponse",
    "TraduoraError",
    "UrlParseError",
    "AuthError",
    "BodyError",
    "ClientError",
    "JsonError",
    "DataTypeError",
    "TraduoraMessageError",
    "TraduoraObjectError",
    "TraduoraUnrecognizedError",
    "TraduoraServiceError",
    "InsufficientScopeError",
]
