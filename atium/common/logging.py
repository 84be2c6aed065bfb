# atium/common/logging.py
from __future__ import annotations

import logging

from atium.common.settings import get_settings


def get_logger(name: str = "atium", level: int | str | None = None) -> logging.Logger:
    """
    Return a named logger at `level` (defaults to settings.log_level).
    If the root logger has no handlers yet we add a basicConfig once, so
    library use under another app keeps its handlers.
    """
    if level is None:
        level = get_settings().log_level.upper()
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
