"""
Logging utilities for the Reversi engine.
"""
import os
import logging
from typing import Optional

from .config import Config

LOGGER_NAME = 'reversi'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(config: Config, log_dir: Optional[str] = None) -> logging.Logger:
    """
    Set up the logger shared by every module of the package.

    Args:
        config: Configuration object
        log_dir: Directory to save logs (default: config.logging.log_dir)

    Returns:
        The 'reversi' logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.getLevelName(config.logging.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.logging.log_level}")

    # Drop handlers from a previous setup
    close_logger()
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    # Console logging
    if config.logging.verbose:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        logger.addHandler(console)

    # File logging
    if config.logging.log_to_file:
        log_dir = log_dir or config.logging.log_dir
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, config.logging.log_file))
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def close_logger():
    """Remove handlers from the package logger and flush all pending logs."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
