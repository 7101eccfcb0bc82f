from traduora_lib.data_models.base_model import (
    TraduoraModel,
    AccessDates,
    ProjectId,
    Role,
)


class Project(TraduoraModel):
    """
    A translation project.

    Attributes
    ----------
    id : ProjectId
        Identifier used in the paths of all project scoped endpoints.
    locales_count : int
        Number of locales the project is translated into.
    terms_count : int
        Number of terms defined in the project.
    role : Role
        Role of the current user within the project.
    """

    id: ProjectId
    name: str
    description: str
    locales_count: int
    terms_count: int
    role: Role
    date: AccessDates


class ProjectPayload(TraduoraModel):
    """Body of the create and edit project requests."""

    name: str
    description: str
