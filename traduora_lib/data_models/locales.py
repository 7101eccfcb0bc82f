from typing import NewType

from traduora_lib.data_models.base_model import TraduoraModel, AccessDates

LocaleCode = NewType("LocaleCode", str)
ProjectLocaleId = NewType("ProjectLocaleId", str)


class Locale(TraduoraModel):
    """A standardized locale known to Traduora (e.g. ``en_US``)."""

    code: LocaleCode
    language: str
    region: str


class ProjectLocale(TraduoraModel):
    """A locale a specific project is translated into."""

    id: ProjectLocaleId
    locale: Locale
    date: AccessDates


class LocalePayload(TraduoraModel):
    """Body of the request adding a locale to a project."""

    code: LocaleCode
