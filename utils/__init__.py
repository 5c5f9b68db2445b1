"""
Utility modules for the pattern demonstrations.
"""
from .logging_config import get_logger, LoggerFactory, LogContext, StructuredFormatter
from .exceptions import (
    PatternError,
    ConfigurationError,
    PrototypeError,
    UnknownPrototypeError,
    SingletonError
)
from .error_handlers import ErrorContext

__all__ = [
    'get_logger',
    'LoggerFactory',
    'LogContext',
    'StructuredFormatter',
    'PatternError',
    'ConfigurationError',
    'PrototypeError',
    'UnknownPrototypeError',
    'SingletonError',
    'ErrorContext',
]
