import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from stock_tracking.config import LOG_DIR

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str,
    log_dir: str | Path | None = None,
    level=logging.INFO,
    log_to_file: bool = False,
) -> logging.Logger:
    """
    Setup a logger with console and optional file handlers

    Console output goes to stderr, stdout is reserved for the CSV report.

    Args:
        name: Logger name (usually the package name)
        log_dir: Directory to store log files (default: project logs/)
        level: Logging level
        log_to_file: Whether to create file handler

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        if log_dir is None:
            log_dir = LOG_DIR

        os.makedirs(log_dir, exist_ok=True)

        module_name = name.split(".")[-1]
        log_filename = f"{module_name}_{datetime.now().strftime('%Y%m%d')}.log"
        log_filepath = os.path.join(log_dir, log_filename)

        file_handler = logging.FileHandler(log_filepath, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_filepath}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a plain logger that inherits the package configuration
    """
    return logging.getLogger(name)
