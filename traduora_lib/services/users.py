"""Endpoints under ``/api/v1/users/me``."""

from dataclasses import dataclass
from typing import Optional

from traduora_lib.auth import Authenticated
from traduora_lib.endpoint import BareModel, DefaultModel, JsonBodyMixin
from traduora_lib.data_models.users import EditMePayload, UserInfo


@dataclass(frozen=True)
class Me(DefaultModel):
    """Profile of the user the access token belongs to."""

    access_control = Authenticated
    model = UserInfo

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return "users/me"


@dataclass(frozen=True)
class EditMe(JsonBodyMixin, DefaultModel):
    """
    Update name and/or email of the current user.

    Fields left as ``None`` are not sent and therefore not changed.
    """

    name: Optional[str] = None
    email: Optional[str] = None

    access_control = Authenticated
    model = UserInfo

    def method(self) -> str:
        return "PATCH"

    def endpoint(self) -> str:
        return "users/me"

    def payload(self) -> EditMePayload:
        return EditMePayload(name=self.name, email=self.email)


@dataclass(frozen=True)
class DeleteMe(BareModel):
    """Delete the account of the current user."""

    access_control = Authenticated
    model = None

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return "users/me"
