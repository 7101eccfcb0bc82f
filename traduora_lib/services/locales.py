from dataclasses import dataclass
from typing import List

from traduora_lib.auth import Authenticated
from traduora_lib.endpoint import DefaultModel
from traduora_lib.data_models.locales import Locale


@dataclass(frozen=True)
class AllLocales(DefaultModel):
    """List every locale supported by the Traduora instance."""

    access_control = Authenticated
    model = List[Locale]

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        return "locales"
