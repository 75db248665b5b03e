"""Logging setup shared by the Streamlit pages and the API."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

ROOT_NAMESPACE = "pawsplace"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# supabase-py logs every request through these
NOISY_LOGGERS: Iterable[str] = ("httpx", "httpcore", "hpack")


def configure_logging(namespace: str = ROOT_NAMESPACE, level: Optional[str] = None) -> logging.Logger:
    """Attach one stream handler to ``namespace`` and return the logger.

    Streamlit re-runs scripts on every interaction, so the handler is only
    added the first time. ``level`` defaults to ``LOG_LEVEL`` (INFO).
    """

    logger = logging.getLogger(namespace)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())
    logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logger


def get_logger(child: Optional[str] = None) -> logging.Logger:
    base = configure_logging()
    return base.getChild(child) if child else base
