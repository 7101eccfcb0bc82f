"""
Project overview example

Logs in with a password, then prints every project of the user together
with its terms.  Run against a local instance with plain http::

    TRADUORA_USE_HTTP=1 python project_overview.py
"""

from traduora_lib import Login, TraduoraBuilder, TraduoraError
from traduora_lib.services.projects import Projects
from traduora_lib.services.terms import Terms
from traduora_lib.services.users import Me
from traduora_lib.utils.logger import prepare_logger

from constants import HOST, USER_MAIL, USER_PASSWORD

logger = prepare_logger("traduora_lib")


def main():
    client = (
        TraduoraBuilder(HOST)
        .authenticate(Login.password(USER_MAIL, USER_PASSWORD))
        .build()
    )

    with client:
        me = Me().query(client)
        print(f"Logged in as {me.name} <{me.email}>")

        for project in Projects().query(client):
            print(f"\n{project.name} ({project.role.value})")
            for term in Terms(project.id).query(client):
                print(f"  - {term.value}")


if __name__ == "__main__":
    try:
        main()
    except TraduoraError as e:
        logger.error(f"Traduora request failed: {e}")
        raise SystemExit(1)
