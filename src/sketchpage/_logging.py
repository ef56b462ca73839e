"""Console logging setup."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "SKETCHPAGE_LOG_LEVEL"


def setup_console_logging(level: str | None = None) -> logging.Logger:
    """Configure stderr logging and return the package logger.

    ``level`` wins over ``SKETCHPAGE_LOG_LEVEL``; the default is WARNING.
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    return logging.getLogger("sketchpage")
