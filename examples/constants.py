import os

# ----------------------------------------------------------------------
# Traduora instance used by the examples, e.g. a local docker container
# started with ``docker run -p 8080:8080 everco/traduora``.
# ----------------------------------------------------------------------
HOST = os.getenv("TRADUORA_HOST", "localhost:8080")

# ----------------------------------------------------------------------
# Credentials of an existing user of the instance.
# ----------------------------------------------------------------------
USER_MAIL = os.getenv("TRADUORA_USER_MAIL", "test@test.test")
USER_PASSWORD = os.getenv("TRADUORA_USER_PASSWORD", "12345678")
