"""Namespaced loggers for ordstat.

Each module logs under ``ordstat.<area>`` (``api``, ``shuffle``,
``algo.numba``); kernel dispatch and clamped unique ranks go out at DEBUG.
"""

from __future__ import annotations

import logging
from typing import Optional

from . import config as os_config


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``ordstat.<name>`` (or ``ordstat``) at the level of `ORDSTAT_LOG_LEVEL`.

    The first call also installs the package handler through `runtime_config`.
    """

    logger_name = "ordstat" if name is None else f"ordstat.{name}"
    level = os_config.runtime_config().log_level
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    return logger
