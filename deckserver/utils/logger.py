"""Logging for the deck server.

A single stdout handler sits on the ``deckserver`` logger; module loggers
are its children and propagate to it, so uvicorn's own loggers are left
alone.
"""
import logging
import sys
from typing import Optional

from deckserver.config import config

ROOT_LOGGER = "deckserver"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        root.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
        root.propagate = False
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``deckserver`` hierarchy.

    Args:
        name: Module name, usually ``__name__``. Names outside the package
            are nested under it.
    """
    root = _configure_root()
    if not name or name == ROOT_LOGGER:
        return root
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
