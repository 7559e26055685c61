"""
softcache - Logging Setup

softcache modules log through ``logging.getLogger(__name__)`` and never
install handlers themselves. Applications that have no logging setup of
their own can call ``configure_logging`` once at startup.
"""

import logging

from .config import LogLevel

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: LogLevel | str = LogLevel.INFO) -> None:
    """
    Configure root logging with the softcache format.

    Args:
        level: Log level name, e.g. "DEBUG" or LogLevel.DEBUG
    """
    if isinstance(level, LogLevel):
        level = level.value
    level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("softcache").setLevel(level)
