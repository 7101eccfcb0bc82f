import logging
from typing import Optional, Union

from traduora_lib.constants import LOG_LEVEL


def prepare_logger(
    logger_name: str, level: Optional[Union[int, str]] = None
) -> logging.Logger:
    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else LOG_LEVEL.upper())
    return logger
