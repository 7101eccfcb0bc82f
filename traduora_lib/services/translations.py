"""
Endpoints under ``/api/v1/projects/{project}/translations``.

A project is translated into a set of locales (:class:`Locales`,
:class:`CreateLocale`, :class:`DeleteLocale`); every locale holds one
translation per term (:class:`Translations`, :class:`EditTranslation`).
"""

from dataclasses import dataclass
from typing import List

from traduora_lib.auth import Authenticated
from traduora_lib.endpoint import BareModel, DefaultModel, JsonBodyMixin
from traduora_lib.data_models.base_model import ProjectId, TermId
from traduora_lib.data_models.locales import LocaleCode, LocalePayload, ProjectLocale
from traduora_lib.data_models.translations import Translation, TranslationPayload


@dataclass(frozen=True)
class Locales(DefaultModel):
    """List the locales of a project."""

    project_id: ProjectId

    access_control = Authenticated
    model = List[ProjectLocale]

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}/translations"


@dataclass(frozen=True)
class CreateLocale(JsonBodyMixin, DefaultModel):
    """Add a locale to a project."""

    project_id: ProjectId
    code: LocaleCode

    access_control = Authenticated
    model = ProjectLocale

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}/translations"

    def payload(self) -> LocalePayload:
        return LocalePayload(code=self.code)


@dataclass(frozen=True)
class DeleteLocale(BareModel):
    """Remove a locale and all of its translations from a project."""

    project_id: ProjectId
    code: LocaleCode

    access_control = Authenticated
    model = None

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}/translations/{self.code}"


@dataclass(frozen=True)
class Translations(DefaultModel):
    """List all translations of a project into one locale."""

    project_id: ProjectId
    code: LocaleCode

    access_control = Authenticated
    model = List[Translation]

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}/translations/{self.code}"


@dataclass(frozen=True)
class EditTranslation(JsonBodyMixin, DefaultModel):
    """Set the translation of a term in one locale."""

    project_id: ProjectId
    code: LocaleCode
    term_id: TermId
    value: str

    access_control = Authenticated
    model = Translation

    def method(self) -> str:
        return "PATCH"

    def endpoint(self) -> str:
        return f"projects/{self.project_id}/translations/{self.code}"

    def payload(self) -> TranslationPayload:
        return TranslationPayload(term_id=self.term_id, value=self.value)
