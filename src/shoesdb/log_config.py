"""Logging configuration for processes embedding shoesdb."""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "shoesdb"


def setup_logging(level=logging.INFO, log_file=None):
    """Configure the diagnostic sink for the shoesdb package.

    - Console handler at `level` on the `shoesdb` logger
    - Optional RotatingFileHandler (5 MB max, 3 backups) at `log_file`

    The library never calls this itself; the embedding process does, once.
    Safe to call multiple times; skips if handlers are already attached.
    """
    log = logging.getLogger(PACKAGE_LOGGER)
    if log.handlers:
        return log

    log.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    log.addHandler(console)

    if log_file:
        log_dir = os.path.dirname(os.fspath(log_file))
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler = RotatingFileHandler(
            log_file, maxBytes=5 * 1024 * 1024, backupCount=3
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        log.addHandler(handler)

    return log
