import logging
import os
from typing import Optional, Union

_DEFAULT_FORMAT = os.getenv(
    "FASTRESOURCE_LOG_FORMAT",
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
_configured: Union[bool, str, int] = False


def configure_logging(level: Optional[Union[str, int]] = None) -> Union[str, int]:
    """Configure the ``fastresource`` logger once with a consistent format.

    ``FASTRESOURCE_LOG_LEVEL`` is used when no level is given.
    """
    from .config import log_level_from_env

    global _configured

    if level is None:
        level = log_level_from_env()
    if isinstance(level, str):
        level = level.upper()

    if _configured and _configured == level:
        return level
    _configured = level

    logger = logging.getLogger("fastresource")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT))
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return level
