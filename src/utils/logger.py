"""Logging for the quoting core.

The core never configures handlers itself: its modules only take child
loggers under the ``ammcore`` namespace via get_child_logger, and records
propagate to whatever the host process has set up.

setup_logger is the hook for the orchestrator (the bot process that feeds
balances and prices and publishes the ladder). It is called once at its
startup to attach a console handler and, optionally, a rotating log file.
Nothing inside this package calls it.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional

ROOT_LOGGER_NAME: Final[str] = "ammcore"

LOG_FMT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FMT: Final[str] = "%Y-%m-%d %H:%M:%S"


def _build_handler(to_file: Optional[Path] = None) -> logging.Handler:
    if to_file:
        handler = RotatingFileHandler(to_file, maxBytes=5 * 1024 * 1024, backupCount=3)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FMT, datefmt=DATE_FMT))
    return handler


def setup_logger(level: str | int = "INFO", path: str | None = None) -> logging.Logger:
    """Configure and return the package root logger, once per process.

    *level* is a level name ("debug", "INFO") or a logging constant; an
    unknown name falls back to INFO. Later calls return the configured
    logger unchanged.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if root.handlers:  # already configured
        return root

    if isinstance(level, int):
        root.setLevel(level)
    else:
        root.setLevel(getattr(logging, level.upper(), logging.INFO))

    root.addHandler(_build_handler())
    if path:
        root.addHandler(_build_handler(Path(path)))

    root.debug("Logger initialised at level %s", level)
    return root


def get_child_logger(parent: logging.Logger | None, name: str) -> logging.Logger:
    """Return a namespaced child logger under *parent* (package root if None)."""
    if parent is None:
        parent = logging.getLogger(ROOT_LOGGER_NAME)
    return parent.getChild(name)
