"""
Logging setup shared by all pdf_summary modules.

Modules call ``get_logger(__name__)``; the CLI calls ``configure_logging``
once before doing any work.
"""

import logging
import sys
from typing import Union

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO, fmt: str = DEFAULT_FORMAT, stream=None) -> None:
    """
    Configure the package logger.

    Args:
        level: Level name ("DEBUG", "info", ...) or numeric level.
        fmt: Log record format.
        stream: Output stream, stderr by default so stdout stays clean for --no-save.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger("pdf_summary")
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
