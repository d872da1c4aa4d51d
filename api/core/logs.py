"""
Root logger setup for the API process.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    resolved = logging.getLevelName((level or "").strip().upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
