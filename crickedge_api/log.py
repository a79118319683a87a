# crickedge_api/log.py
from __future__ import annotations

import logging

from crickedge_api.config import LOG_LEVEL


def get_logger(name: str = "crickedge") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)

    # Avoid duplicate handlers on re-import (uvicorn --reload)
    if not logger.handlers:
        formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False

    return logger
