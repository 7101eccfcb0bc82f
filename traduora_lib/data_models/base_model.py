"""
Base model definitions for the Traduora client library.

All response models returned by Traduora use ``camelCase`` keys.  The
:class:`TraduoraModel` base maps them onto ``snake_case`` attributes while
still accepting the Python names, and freezes the instances so a decoded
model can be shared freely between threads and tasks.
"""

from datetime import datetime
from enum import Enum
from typing import NewType

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

AccessTokenValue = NewType("AccessTokenValue", str)
UserId = NewType("UserId", str)
ProjectId = NewType("ProjectId", str)
TermId = NewType("TermId", str)


class TraduoraModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class AccessDates(TraduoraModel):
    """
    Timestamps of the latest interactions with an object.

    What exactly an object is depends on the endpoint that returns the
    dates (a project, a term, a translation, ...).

    Attributes
    ----------
    created : datetime
        Time when the object was created.
    modified : datetime
        Time when the object was last changed.
    """

    created: datetime
    modified: datetime


class Role(str, Enum):
    """
    Project specific role of a user.

    The creator of a project becomes its admin, every other member gets the
    role the admin chose while inviting them.
    """

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"
