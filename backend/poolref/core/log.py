"""Root logger setup for processes embedding poolref."""

import logging

from poolref.core.config import settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once; LOG_LEVEL from settings unless *level* given."""
    lvl = (level or settings.LOG_LEVEL or "INFO").upper()
    logging.basicConfig(level=getattr(logging, lvl, logging.INFO), format=_FORMAT)
