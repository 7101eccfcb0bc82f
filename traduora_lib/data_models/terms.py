from typing import List

from traduora_lib.data_models.base_model import TraduoraModel, AccessDates, TermId


class Term(TraduoraModel):
    """A translatable term of a project."""

    id: TermId
    value: str
    labels: List[str]
    date: AccessDates


class TermPayload(TraduoraModel):
    """Body of the create and edit term requests."""

    value: str
