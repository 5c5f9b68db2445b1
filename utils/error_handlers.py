"""
Error handling utilities.
"""
from typing import Any, Dict, Optional
from .logging_config import get_logger
from .exceptions import PatternError


logger = get_logger(__name__)


def describe_error(error: BaseException) -> Dict[str, Any]:
    """Structured description of any exception, in PatternError.to_dict() shape."""
    if isinstance(error, PatternError):
        return error.to_dict()
    return {
        'error_type': error.__class__.__name__,
        'error_code': error.__class__.__name__,
        'message': str(error),
        'details': {}
    }


class ErrorContext:
    """
    Context manager that records how a named operation failed.

    After the block, `error` holds the structured description of the
    exception (None on success). Pattern errors are logged without a
    traceback; anything else is unexpected and logged with one.
    """

    def __init__(self, operation_name: str, raise_on_error: bool = True):
        self.operation_name = operation_name
        self.raise_on_error = raise_on_error
        self.error: Optional[Dict[str, Any]] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def __enter__(self):
        logger.debug(f"Starting operation: {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            logger.debug(f"Completed operation: {self.operation_name}")
            return False

        if not issubclass(exc_type, Exception):
            return False

        self.error = describe_error(exc_val)
        if isinstance(exc_val, PatternError):
            logger.error(
                f"{self.operation_name} failed: {exc_val.message}",
                extra={'error_details': self.error}
            )
        else:
            logger.error(
                f"Unexpected error in {self.operation_name}: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )

        # Suppress exception if raise_on_error is False
        return not self.raise_on_error
