"""Centralized logging configuration for the Kostkas stats engine."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure logging for the application.

    Creates both file and console handlers with appropriate formatting.

    Args:
        log_dir: Directory for log files (default: ./logs)
        level: Logging level (default: INFO)
        log_to_file: Whether to log to file (default: True)
        log_to_console: Whether to log to console (default: True)

    Returns:
        Configured logger instance

    Example:
        from kostkas.logging_config import setup_logging
        logger = setup_logging(log_to_file=False)
        logger.info("Loading match table")
    """
    logger = logging.getLogger('kostkas')
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers = []

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
    simple_formatter = logging.Formatter('%(levelname)s: %(message)s')

    if log_to_file:
        if log_dir is None:
            log_dir = Path('logs')
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f'kostkas_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    if log_to_console:
        # stderr keeps stdout clean for report output
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(simple_formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = 'kostkas') -> logging.Logger:
    """
    Get a logger under the 'kostkas' hierarchy.

    Short names are nested below the package logger, so 'cli' and
    'kostkas.cli' are the same logger and share the handlers installed
    by setup_logging().

    Args:
        name: Logger name (default: 'kostkas')

    Returns:
        Logger instance
    """
    if name != 'kostkas' and not name.startswith('kostkas.'):
        name = f'kostkas.{name}'
    return logging.getLogger(name)
