import logging, sys
from typing import Optional

from catalog.settings import LOG_LEVEL

def setup_logging(level: Optional[str] = None, stream=None):
    """Attach one stdout handler to the root logger (CLI and API share it)."""
    logger = logging.getLogger()
    if logger.handlers:  # don’t double add during reload
        return
    level = (level or LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level, logging.INFO))
    h = logging.StreamHandler(stream or sys.stdout)
    h.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s :: %(message)s"
    ))
    logger.addHandler(h)
