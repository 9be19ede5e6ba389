"""
Logging helpers for frame_analyzer.

Library modules only call ``get_logger(__name__)``. Entry points (the CLI and
the Flask app) call ``configure_logging()`` once to attach a stderr handler
to the ``frame_analyzer`` logger; the root logger is never touched.
"""

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "frame_analyzer"
DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[Union[str, int]] = None, force: bool = False) -> None:
    """
    Attach a stderr handler to the frame_analyzer logger.

    Args:
        level: Logging level name or number. Defaults to the
               FRAME_ANALYZER_LOG_LEVEL environment variable, else "INFO"
        force: If True, replace existing handlers instead of keeping them
    """
    if level is None:
        level = os.environ.get("FRAME_ANALYZER_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if force:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
    else:
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler) and handler.stream is sys.stderr:
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=DEFAULT_FMT, datefmt=DEFAULT_DATEFMT))
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the named logger, or the package logger when name is None."""
    return logging.getLogger(name or LOGGER_NAME)
