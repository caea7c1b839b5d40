"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain namespaced loggers.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - Library modules only emit DEBUG records and never configure handlers
      themselves; the root ``randstr`` logger carries a ``NullHandler``.
    - :func:`configure_logging` is idempotent.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "randstr"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_ATTR = "_randstr_handler"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Repeated calls only adjust the level and point the handler at the
    current ``sys.stderr``.
    """

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    handler = next(
        (
            h
            for h in root.handlers
            if isinstance(h, logging.StreamHandler) and getattr(h, _HANDLER_ATTR, False)
        ),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
    else:
        # old stream may be closed; do not flush it
        handler.stream = sys.stderr
    root.setLevel(level)
    return root
