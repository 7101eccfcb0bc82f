"""Endpoints under ``/api/v1/projects/{project}/terms``."""

from dataclasses import dataclass
from typing import List

from traduora_lib.auth import Authenticated
from traduora_lib.endpoint import BareModel, DefaultModel, JsonBodyMixin
from traduora_lib.data_models.base_model import ProjectId, TermId
from traduora_lib.data_models.terms import Term, TermPayload


@dataclass(frozen=True)
class Terms(DefaultModel):
    """List all terms of a project."""

    project_id: ProjectId

    access_control = Authenticated
    model = List[Term]

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}/terms"


@dataclass(frozen=True)
class CreateTerm(JsonBodyMixin, DefaultModel):
    project_id: ProjectId
    value: str

    access_control = Authenticated
    model = Term

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}/terms"

    def payload(self) -> TermPayload:
        return TermPayload(value=self.value)


@dataclass(frozen=True)
class EditTerm(JsonBodyMixin, DefaultModel):
    """Rename a term; its translations are kept."""

    project_id: ProjectId
    term_id: TermId
    value: str

    access_control = Authenticated
    model = Term

    def method(self) -> str:
        return "PATCH"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}/terms/{self.term_id}"

    def payload(self) -> TermPayload:
        return TermPayload(value=self.value)


@dataclass(frozen=True)
class DeleteTerm(BareModel):
    project_id: ProjectId
    term_id: TermId

    access_control = Authenticated
    model = None

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}/terms/{self.term_id}"
