"""
Logging Configuration
Sets up the 'csvgrid' logger namespace for the application.
"""
import logging
import sys
from typing import Optional


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    console: bool = False,
) -> None:
    """
    Configures the logger for the 'csvgrid' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to append logs to.
        console: Also log to stderr. Must stay off while curses owns the screen.
    """
    logger = logging.getLogger("csvgrid")
    logger.setLevel(level)
    logger.propagate = False

    # Avoid duplicate handlers when called twice in one process
    if logger.hasHandlers():
        logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug("Logging initialized.")
