"""Logger factory for contractgraph.

All loggers live under the ``contractgraph`` namespace. The package root
gets a ``NullHandler`` so nothing is printed unless the host application
configures logging. Setting ``CONTRACTGRAPH_LOG_LEVEL`` (e.g. ``DEBUG``)
adjusts the root level.
"""

from __future__ import annotations

import logging
import os

ROOT_LOGGER_NAME = "contractgraph"
LOG_LEVEL_ENV = "CONTRACTGRAPH_LOG_LEVEL"

_root = logging.getLogger(ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())


def _apply_env_level() -> None:
    level = os.environ.get(LOG_LEVEL_ENV)
    if level:
        _root.setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root."""
    _apply_env_level()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
