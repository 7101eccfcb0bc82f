"""
Constants and environment driven defaults for the Traduora client library.

Every value can be overridden through an environment variable prefixed with
``TRADUORA_``.  Values passed explicitly to :class:`TraduoraBuilder` always
take precedence over the environment.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "TRADUORA_"


def _bool_env(name: str, default: bool) -> bool:
    value = os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}{name}")
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Path of the REST API below the host, always terminated with a slash
API_ROOT = "api/v1/"

# Content type of every request body sent to Traduora
JSON_MIME_TYPE = "application/json"

# Use plain http instead of https when building the base url
USE_HTTP = _bool_env("USE_HTTP", False)

# Validate TLS certificates (disable for self-signed instances)
VALIDATE_CERTS = _bool_env("VALIDATE_CERTS", True)

# Transport timeout in seconds, 0 means: wait as long as the transport does
DEFAULT_TIMEOUT = float(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}TIMEOUT", 0)
)

# Default logging level used by ``prepare_logger``
LOG_LEVEL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO"
).strip()
