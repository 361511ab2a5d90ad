"""
Logging utilities for the dashboard data layer.

Every module logger is a child of the ``dashboard_data`` logger, which
carries the single stream handler and the level from LOG_LEVEL. Host
applications can silence or redirect the whole layer through that one name.
"""

import logging
import os
from pathlib import Path

ROOT_LOGGER = "dashboard_data"

# Default log level from environment or INFO
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def _package_logger() -> logging.Logger:
    log = logging.getLogger(ROOT_LOGGER)
    if not log.handlers:
        log.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        log.addHandler(handler)
    return log


def logger(name: str) -> logging.Logger:
    """
    Return the package logger for a module.

    Args:
        name: Module name or __file__ path; paths are reduced to their stem,
            so ``__file__`` of data_source_live.py yields
            ``dashboard_data.data_source_live``. A package ``__init__.py``
            is named after its directory.
    """
    if "/" in name or "\\" in name:
        path = Path(name)
        name = path.parent.name if path.stem == "__init__" else path.stem
    _package_logger()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
