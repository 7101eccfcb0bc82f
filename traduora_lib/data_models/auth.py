"""Models returned by the endpoints under ``/api/v1/auth``."""

from pydantic import BaseModel, ConfigDict

from traduora_lib.data_models.base_model import (
    TraduoraModel,
    AccessTokenValue,
    UserId,
)


class AccessToken(BaseModel):
    """
    Answer of the token endpoint.

    Unlike every other model this one uses ``snake_case`` keys on the wire
    and is not wrapped in a ``data`` object.
    """

    model_config = ConfigDict(frozen=True)

    access_token: AccessTokenValue
    expires_in: str
    token_type: str

    def __repr__(self):
        return (
            f"AccessToken(access_token='***', expires_in={self.expires_in!r}, "
            f"token_type={self.token_type!r})"
        )


class AuthProvider(TraduoraModel):
    """An external authentication provider configured on the instance."""

    slug: str
    client_id: str
    url: str
    redirect_url: str


class NewUser(TraduoraModel):
    """User created by the signup endpoint, including its first token."""

    id: UserId
    name: str
    email: str
    access_token: AccessTokenValue


class PasswordGrantPayload(BaseModel):
    """Body of a token request using the ``password`` grant."""

    grant_type: str = "password"
    username: str
    password: str


class ClientCredentialsPayload(BaseModel):
    """Body of a token request using the ``client_credentials`` grant."""

    grant_type: str = "client_credentials"
    client_id: str
    client_secret: str


class SignupPayload(TraduoraModel):
    name: str
    email: str
    password: str


class ChangePasswordPayload(TraduoraModel):
    old_password: str
    new_password: str
