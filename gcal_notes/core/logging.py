"""
Logging setup for the "gcal" logger namespace.

Every module takes a named child logger, e.g.
logging.getLogger("gcal.services.calendar"), so one handler on the
namespace root is enough.
"""

import logging
import sys
from typing import Optional

from gcal_notes.core.config import settings


LOGGER_NAMESPACE = "gcal"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler to the "gcal" logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Level name (defaults to settings.LOG_LEVEL, DEBUG if settings.DEBUG)

    Returns:
        The configured namespace logger
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)

    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
