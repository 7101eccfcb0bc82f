"""Endpoints under ``/api/v1/projects``."""

from dataclasses import dataclass
from typing import List

from traduora_lib.auth import Authenticated
from traduora_lib.endpoint import BareModel, DefaultModel, JsonBodyMixin
from traduora_lib.data_models.base_model import ProjectId
from traduora_lib.data_models.projects import Project, ProjectPayload


@dataclass(frozen=True)
class Projects(DefaultModel):
    """List all projects the user is a member of."""

    access_control = Authenticated
    model = List[Project]

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return "projects"


@dataclass(frozen=True)
class CreateProject(JsonBodyMixin, DefaultModel):
    """Create a new project; the user becomes its admin."""

    name: str
    description: str

    access_control = Authenticated
    model = Project

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return "projects"

    def payload(self) -> ProjectPayload:
        return ProjectPayload(name=self.name, description=self.description)


@dataclass(frozen=True)
class ShowProject(DefaultModel):
    project_id: ProjectId

    access_control = Authenticated
    model = Project

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}"


@dataclass(frozen=True)
class EditProject(JsonBodyMixin, DefaultModel):
    """Change name and description of a project."""

    project_id: ProjectId
    name: str
    description: str

    access_control = Authenticated
    model = Project

    def method(self) -> str:
        return "PATCH"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}"

    def payload(self) -> ProjectPayload:
        return ProjectPayload(name=self.name, description=self.description)


@dataclass(frozen=True)
class DeleteProject(BareModel):
    """Delete a project including all its terms and translations."""

    project_id: ProjectId

    access_control = Authenticated
    model = None

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}"
