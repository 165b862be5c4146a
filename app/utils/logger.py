# app/utils/logger.py
"""
Logging setup shared by the API, the engine and the scripts.
Console output always; a rotating file under LOG_DIR when LOG_TO_FILE is on.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from app.config import settings

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

_configured = False


def _build_file_handler(level: str) -> RotatingFileHandler:
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    # 10 files × 5MB
    handler = RotatingFileHandler(
        filename=os.path.join(settings.LOG_DIR, "parking.log"),
        maxBytes=5 * 1024 * 1024,
        backupCount=10,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    level = settings.LOG_LEVEL.upper()
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    handlers = [logging.StreamHandler()]
    if settings.LOG_TO_FILE:
        handlers.append(_build_file_handler(level))

    root = logging.getLogger()
    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # SQL echo stays off unless explicitly asked for
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
