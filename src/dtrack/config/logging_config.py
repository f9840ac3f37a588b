"""Logging configuration for the dtrack service."""

import logging
import sys
from typing import Optional

from dtrack.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Capped at WARNING whatever log_level says; INFO here logs every statement.
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Send dtrack logs to stdout at the configured level.

    basicConfig is a no-op when the root logger already has handlers (under
    uvicorn or pytest), so the ``dtrack`` package logger gets its level set
    directly as well.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("dtrack").setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
