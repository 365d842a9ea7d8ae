"""Application-wide logging backed by a rotating file in platformdirs user_log_dir.

Every module asks for a child of the ``pomotask`` logger so the log file
shows which component wrote each record::

    logger = get_logger(__name__)
    logger.info("task added: %s", task.id)

The level defaults to DEBUG and can be lowered with ``POMOTASK_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

ROOT_LOGGER_NAME = "pomotask"
LOG_FILE_NAME = "pomotask.log"
LOG_LEVEL_ENV = "POMOTASK_LOG_LEVEL"

_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_root: logging.Logger | None = None


def _file_handler() -> logging.Handler:
    log_dir = Path(user_log_dir(ROOT_LOGGER_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def _configure_root() -> logging.Logger:
    level_name = os.environ.get(LOG_LEVEL_ENV, "DEBUG").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.DEBUG

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    if not root.handlers:
        root.addHandler(_file_handler())
    root.propagate = False
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or one of its children.

    Args:
        name: Dotted module name. Names outside the ``pomotask`` namespace are
            nested under it; ``None`` returns the root application logger.
    """
    global _root
    if _root is None:
        _root = _configure_root()

    if not name or name == ROOT_LOGGER_NAME:
        return _root
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
