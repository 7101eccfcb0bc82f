"""
Endpoints under ``/api/v1/auth``.

:class:`Token` is the login exchange used by :class:`TraduoraBuilder` to turn
credentials into an access token.  Its answer is the only one Traduora does
not wrap in a ``data`` envelope.
"""

from dataclasses import dataclass, field
from typing import List

from traduora_lib.auth import Authenticated, Unauthenticated
from traduora_lib.endpoint import BareModel, DefaultModel, JsonBodyMixin
from traduora_lib.data_models.auth import (
    AccessToken,
    AuthProvider,
    ChangePasswordPayload,
    ClientCredentialsPayload,
    NewUser,
    PasswordGrantPayload,
    SignupPayload,
)

PASSWORD_GRANT = "password"
CLIENT_CREDENTIALS_GRANT = "client_credentials"


@dataclass(frozen=True)
class Providers(DefaultModel):
    """List the external authentication providers of the instance."""

    access_control = Unauthenticated
    model = List[AuthProvider]

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return "auth/providers"


@dataclass(frozen=True)
class Signup(JsonBodyMixin, DefaultModel):
    """Create a new user account."""

    name: str
    email: str
    password: str = field(repr=False)

    access_control = Unauthenticated
    sensitive = True
    model = NewUser

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return "auth/signup"

    def payload(self) -> SignupPayload:
        return SignupPayload(name=self.name, email=self.email, password=self.password)


@dataclass(frozen=True)
class Token(JsonBodyMixin, BareModel):
    """
    Request an access token.

    Use :meth:`password` to log in as a user or :meth:`client_credentials`
    to log in as a project client.  Secrets never show up in ``repr``.
    """

    grant_type: str
    identity: str
    secret: str = field(repr=False)

    access_control = Unauthenticated
    sensitive = True
    model = AccessToken

    @classmethod
    def password(cls, mail: str, password: str) -> "Token":
        return cls(grant_type=PASSWORD_GRANT, identity=mail, secret=password)

    @classmethod
    def client_credentials(cls, client_id: str, client_secret: str) -> "Token":
        return cls(
            grant_type=CLIENT_CREDENTIALS_GRANT,
            identity=client_id,
            secret=client_secret,
        )

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return "auth/token"

    def payload(self):
        if self.grant_type == PASSWORD_GRANT:
            return PasswordGrantPayload(username=self.identity, password=self.secret)
        if self.grant_type == CLIENT_CREDENTIALS_GRANT:
            return ClientCredentialsPayload(
                client_id=self.identity, client_secret=self.secret
            )
        raise ValueError(f"unsupported grant type {self.grant_type!r}")


@dataclass(frozen=True, repr=False)
class ChangePassword(JsonBodyMixin, BareModel):
    """Change the password of the authenticated user."""

    old_password: str
    new_password: str

    access_control = Authenticated
    sensitive = True
    model = None

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return "auth/change-password"

    def payload(self) -> ChangePasswordPayload:
        return ChangePasswordPayload(
            old_password=self.old_password, new_password=self.new_password
        )

    def __repr__(self):
        return "ChangePassword(old_password='***', new_password='***')"
