"""Minimal logging helpers for the project."""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def get_logger(name: str = "bdrate", level: int | str = logging.WARNING, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """Return a :class:`logging.Logger` writing to stderr.

    The ``StreamHandler`` is attached only once per logger; later calls just
    update the level and the format.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        handler.setFormatter(logging.Formatter(fmt))
    logger.setLevel(level)
    return logger
