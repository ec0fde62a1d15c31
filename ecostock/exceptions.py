from functools import wraps
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

class EcoStockException(Exception):
    """Base exception for the EcoStock backend."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

        # Log the exception for monitoring
        logger.error(f"{self.__class__.__name__}: {message}", extra={"details": self.details})

class DatabaseError(EcoStockException):
    """Raised when database operations fail."""

    def __init__(self, operation: str, error: str):
        message = f"Database operation '{operation}' failed: {error}"
        details = {"operation": operation, "database_error": error}
        super().__init__(message, details)

class ConfigurationError(EcoStockException):
    """Raised when application configuration is invalid."""

    def __init__(self, setting: str, reason: str):
        message = f"Configuration error for '{setting}': {reason}"
        details = {"setting": setting, "reason": reason}
        super().__init__(message, details)

# Top-level handler for command-line entry points
def handle_setup_exceptions(func):
    """Decorator turning any error raised by an entry point into exit status 1."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except EcoStockException as e:
            logger.error(f"[SETUP] ERROR DURING DATABASE INITIALIZATION: {e.message}")
            return 1
        except Exception as e:
            # Log unexpected exceptions
            logger.exception(f"[SETUP] ERROR DURING DATABASE INITIALIZATION: {e}")
            return 1
    return wrapper
