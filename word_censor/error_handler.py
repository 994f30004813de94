import re
import traceback
from typing import Callable, Tuple
from functools import wraps

from .logging_config import get_logger, LOG_DIR

logger = get_logger(__name__)

LOG_FILE = LOG_DIR / "wordcensor.log"


class UserFriendlyError(Exception):
    """Exception with a user-friendly message"""
    def __init__(self, user_message: str, technical_message: str = None):
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        super().__init__(self.technical_message)


class InvalidInputError(UserFriendlyError, TypeError):
    """Raised when a caller passes something that is not usable text or settings."""


def require_text(value, name: str = "text") -> str:
    """Fail fast on non-string input; empty strings are fine."""
    if not isinstance(value, str):
        raise InvalidInputError(
            f"Expected text for '{name}'",
            f"{name} must be str, got {type(value).__name__}"
        )
    return value


# Error message mappings
ERROR_MESSAGES = {
    InvalidInputError: lambda e: (
        "Invalid input",
        e.user_message
    ),
    UserFriendlyError: lambda e: (
        "Error",
        e.user_message
    ),

    # File errors
    FileNotFoundError: lambda e: (
        "File not found",
        f"The word list or config file could not be found.\n\n"
        f"Path: {e.filename if getattr(e, 'filename', None) else 'Unknown'}"
    ),
    PermissionError: lambda e: (
        "Permission denied",
        "Unable to access this file. Please check that you have permission "
        "to read/write to this location."
    ),
    IsADirectoryError: lambda e: (
        "Invalid file",
        "Expected a file but got a folder. Please select a word list file."
    ),
    UnicodeDecodeError: lambda e: (
        "Unreadable file",
        "The file is not valid UTF-8 text. Save word lists as plain UTF-8."
    ),

    # Pattern errors
    re.error: lambda e: (
        "Invalid pattern",
        f"A filter regular expression could not be compiled:\n\n{e}"
    ),

    # Config errors
    "yaml": lambda e: (
        "Settings file error",
        "Your settings file could not be parsed. Check the YAML syntax "
        "or remove the file to fall back to defaults."
    ),

    # Disk errors
    OSError: lambda e: (
        "Disk error",
        "Unable to read or write files. Please check:\n\n"
        "• The path exists\n"
        "• You have permission to read it"
    ),
}


def get_friendly_message(error: Exception) -> Tuple[str, str]:
    """Get user-friendly title and message for an error"""
    error_str = str(error).lower()
    
    # Check exact type matches first
    for error_type, msg_func in ERROR_MESSAGES.items():
        if isinstance(error_type, type) and isinstance(error, error_type):
            return msg_func(error)
    
    # Check string matches in error message, then the exception's module
    module_name = type(error).__module__.lower()
    for key, msg_func in ERROR_MESSAGES.items():
        if isinstance(key, str) and (key in error_str or key in module_name):
            return msg_func(error)
    
    # Default fallback
    return (
        "Something went wrong",
        f"An unexpected error occurred:\n\n{str(error)[:200]}\n\n"
        "Please try again. If the problem persists, check the log file:\n"
        f"{LOG_FILE}"
    )


def handle_error(error: Exception, context: str = "") -> Tuple[str, str]:
    """Log error and return friendly message"""
    logger.error(f"Error in {context}: {error}")
    logger.debug(traceback.format_exc())
    
    return get_friendly_message(error)


def safe_operation(context: str = "operation"):
    """Decorator for safe error handling"""
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except UserFriendlyError:
                raise  # Already friendly, pass through
            except Exception as e:
                title, message = handle_error(e, context)
                raise UserFriendlyError(message, str(e)) from e
        return wrapper
    return decorator
