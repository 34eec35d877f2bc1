"""
Logging helpers so the store and dashboard log the same way.
"""

import logging
import sys
from typing import Optional

from networth_config import Config


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Attach one stdout handler using Config.LOG_FORMAT; level defaults to Config.LOG_LEVEL."""
    logger = logging.getLogger(name)

    # Streamlit reruns the script on every edit; only attach once
    if logger.handlers:
        return logger

    numeric_level = getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    return setup_logger(name)
