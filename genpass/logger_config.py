"""
Logging configuration: stdlib logging rendered on stderr by rich.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "genpass"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the package logger and return it.
    Safe to call more than once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
