from typing import List

from traduora_lib.data_models.base_model import TraduoraModel, AccessDates, TermId


class Translation(TraduoraModel):
    """The translation of a single term into one locale."""

    term_id: TermId
    value: str
    labels: List[str]
    date: AccessDates


class TranslationPayload(TraduoraModel):
    term_id: TermId
    value: str
