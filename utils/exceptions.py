"""
Custom exception hierarchy for the pattern demonstrations.
"""
from typing import Any, Dict, Optional


class PatternError(Exception):
    """Base exception for all pattern errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


class ConfigurationError(PatternError):
    """Raised when configuration is invalid."""
    pass


class PrototypeError(PatternError):
    """Base exception for prototype registry errors."""
    pass


class UnknownPrototypeError(PrototypeError):
    """Raised when no canonical prototype is registered for a tag."""
    pass


class SingletonError(PatternError):
    """Raised when a singleton would be duplicated."""
    pass
