"""Logging wrapper for pr-refs."""

import logging

from ..constants import DEFAULT_LOG_LEVEL


def get_logger(name: str, level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Return a logger writing to stderr with the package's default format.

    Handlers are attached once; later calls with the same ``name`` return
    the existing logger untouched.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        resolved = getattr(logging, level.upper(), None)
        logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    return logger
