"""Logger setup for the command line entry point.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, on the package logger, when the CLI runs.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "SHORTIDS_LOG_LEVEL"


def get_logger(name: str = "shortids", level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
