"""
Asyncio example

Fetches the translations of all locales of one project concurrently.

    python async_translations.py <project-id>
"""

import asyncio
import sys

from traduora_lib import Login, TraduoraBuilder
from traduora_lib.services.translations import Locales, Translations
from traduora_lib.utils.logger import prepare_logger

from constants import HOST, USER_MAIL, USER_PASSWORD

logger = prepare_logger("traduora_lib", level="DEBUG")


async def main(project_id: str):
    client = await (
        TraduoraBuilder(HOST)
        .authenticate(Login.password(USER_MAIL, USER_PASSWORD))
        .build_async()
    )
    async with client:
        locales = await Locales(project_id).query_async(client)
        results = await asyncio.gather(
            *[
                Translations(project_id, pl.locale.code).query_async(client)
                for pl in locales
            ]
        )

    for pl, translations in zip(locales, results):
        done = sum(1 for t in translations if t.value)
        print(f"{pl.locale.code}: {done}/{len(translations)} translated")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1]))
