from typing import Optional

from traduora_lib.data_models.base_model import TraduoraModel, UserId


class UserInfo(TraduoraModel):
    """Profile of the user the access token belongs to."""

    id: UserId
    name: str
    email: str
    num_projects_created: int


class EditMePayload(TraduoraModel):
    """Body of the profile update; unset fields are left unchanged."""

    name: Optional[str] = None
    email: Optional[str] = None
