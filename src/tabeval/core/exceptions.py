"""Custom exceptions for tabeval core functionality."""
import logging

logger = logging.getLogger(__name__)


class TabEvalError(Exception):
    """Base exception for all tabeval errors."""
    pass


class InputParseError(TabEvalError, ValueError):
    """Exception raised when a request cannot be read as three finite numbers."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("InputParseError raised: %s", message)


class TableLoadError(TabEvalError):
    """Exception raised when a lookup table source is absent or unreadable."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path
        # Recoverable: callers fall back to the closed-form algorithm
        logger.warning("TableLoadError raised: %s", message)


class PreconditionViolation(TabEvalError):
    """Signal raised inside an algorithm when a domain guard rejects its arguments."""

    def __init__(self, message):
        super().__init__(message)
        logger.debug("PreconditionViolation raised: %s", message)
