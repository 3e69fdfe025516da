"""Log utilities."""

import logging
from typing import Optional

from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
LOG_DATE_FORMAT = "[%X]"


def configure_logging(verbose: bool = False, color: bool = True) -> None:
    """Configure the root logger to use Rich console output.

    Parameters:
        verbose (bool): Log at DEBUG level instead of INFO.
        color (bool): Enable colorized output.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[RichHandler(markup=False, rich_tracebacks=color)],
        force=True,
    )


def get_logger(name: str, level: Optional[int] = logging.DEBUG) -> logging.Logger:
    """
    Get a logger configured for Rich console output.

    The returned logger has its handlers replaced with a single RichHandler
    and propagation to ancestor loggers disabled, so the messages of
    long-lived components (caches, runners) are shown even when the root
    logger is configured differently, e.g. by Uvicorn workers.

    Parameters:
        name (str): Name of the logger to retrieve or create.
        level (Optional[int]): Level to set; None keeps the current level.

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    logger.handlers = [RichHandler()]
    logger.propagate = False
    return logger
