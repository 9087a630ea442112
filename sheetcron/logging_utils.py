import logging
import sys

from .config import LOG_LEVEL

def get_logger(name="sheetcron", level=None):
    """stdout logger for the worker; the handler is attached only once per name."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    if level is None:
        level = getattr(logging, LOG_LEVEL, logging.INFO)
    logger.setLevel(level)
    return logger
