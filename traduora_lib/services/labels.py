"""Endpoints under ``/api/v1/projects/{project}/labels``."""

from dataclasses import dataclass
from typing import List

from traduora_lib.auth import Authenticated
from traduora_lib.endpoint import DefaultModel
from traduora_lib.data_models.base_model import ProjectId
from traduora_lib.data_models.labels import Label


@dataclass(frozen=True)
class Labels(DefaultModel):
    """List the labels defined in a project."""

    project_id: ProjectId

    access_control = Authenticated
    model = List[Label]

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}/labels"
