"""
Centralized logging configuration for word_censor.

Library code only asks for module loggers; the CLI calls setup_logging().
Logs are stored in ~/.wordcensor/logs/ with rotation, or in the directory
named by WORD_CENSOR_LOG_DIR.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional


# Global flag to prevent duplicate initialization
_logging_initialized = False

LOGGER_NAMESPACE = "word_censor"

# Default log directory
LOG_DIR = Path(os.environ.get("WORD_CENSOR_LOG_DIR", Path.home() / ".wordcensor" / "logs"))


def get_log_dir() -> Path:
    """Get the log directory, creating it if necessary."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return LOG_DIR


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
    force: bool = False,
    debug_mode: bool = False,
) -> logging.Logger:
    """
    Configure logging for the package.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional custom log file path. If None, uses default.
        console: Whether to log to stderr
        force: Force reconfiguration even if already initialized
        debug_mode: Verbose logging, including every classification decision
    
    Returns:
        The package logger
    """
    global _logging_initialized
    
    if _logging_initialized and not force:
        return logging.getLogger(LOGGER_NAMESPACE)
    
    if debug_mode:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, level.upper(), logging.INFO)
    
    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    root_logger.setLevel(log_level)
    
    # Close handlers from a previous setup before dropping them
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()
    
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
    
    if log_file:
        log_path = Path(log_file)
    else:
        log_path = get_log_file_path()
    
    log_path.parent.mkdir(parents=True, exist_ok=True)
    
    # Rotating file handler: 5MB max, keep 3 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG if debug_mode else log_level)
    if debug_mode:
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
    else:
        file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    
    _logging_initialized = True
    
    root_logger.debug(f"Logging initialized: level={level}, file={log_path}")
    
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.
    
    Usage:
        from word_censor.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)


def get_log_file_path() -> Path:
    """Get the path to the main log file."""
    return get_log_dir() / "wordcensor.log"
