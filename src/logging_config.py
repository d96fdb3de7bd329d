"""
Logging configuration for word search generator.
Provides optional file and console handlers with detailed formatting.
"""
#
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional


def setup_logging(
    output_dir: Optional[str] = None,
    log_level: str = "INFO",
    log_file_prefix: str = "word_search_generator",
    enable_console: bool = False,
) -> Optional[str]:
    """
    Configure logging with an optional rotating file and console handler.

    The console handler writes to stderr; stdout belongs to the interactive
    menu.

    Args:
        output_dir: Directory where log file will be saved (None: no file)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file_prefix: Prefix for log filename
        enable_console: Whether to enable console logging

    Returns:
        Path to the log file, or None when file logging is disabled
    """
    # Convert string level to logging constant
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s - %(levelname)-8s - %(name)s:%(lineno)d - %(funcName)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_formatter = logging.Formatter(
        fmt="%(levelname)-8s - %(message)s"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, handlers will filter

    # Remove existing handlers to avoid duplicates
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    log_path = None
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = os.path.join(output_dir, f"{log_file_prefix}_{timestamp}.log")

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized: {log_path or 'no log file'}")
    logger.debug(f"Log level: {log_level}, Console: {enable_console}")

    return log_path


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
