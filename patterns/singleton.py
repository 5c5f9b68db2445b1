"""
Singleton pattern for single-instance classes.
"""
from typing import Any, Dict
import threading
from utils.logging_config import get_logger
from utils.exceptions import SingletonError

logger = get_logger(__name__)


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass.

    The lookup and the construction happen under one lock, so concurrent
    first callers can never build two instances of the same class.
    """
    _instances: Dict[type, Any] = {}
    _lock: threading.RLock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        """Create or return existing instance."""
        with SingletonMeta._lock:
            if cls not in SingletonMeta._instances:
                instance = super().__call__(*args, **kwargs)
                SingletonMeta._instances[cls] = instance
                logger.debug(f"Created singleton instance of {cls.__name__}")

        return SingletonMeta._instances[cls]

    def is_initialized(cls) -> bool:
        with SingletonMeta._lock:
            return cls in SingletonMeta._instances


class Singleton(metaclass=SingletonMeta):
    """
    Process-wide value holder created lazily by the first caller.

    Later calls return the same object and ignore their argument.
    """

    def __init__(self, value: str):
        self._value = value
        self.logger = get_logger(self.__class__.__name__)

    @classmethod
    def get_instance(cls, value: str) -> 'Singleton':
        """Return the instance, building it from value on first access."""
        return cls(value)

    @property
    def value(self) -> str:
        return self._value

    def some_business_logic(self) -> str:
        self.logger.debug(f"Running business logic with value {self._value!r}")
        return self._value

    def __copy__(self):
        raise SingletonError(
            f"{self.__class__.__name__} cannot be copied",
            details={'operation': 'copy'}
        )

    def __deepcopy__(self, memo):
        raise SingletonError(
            f"{self.__class__.__name__} cannot be copied",
            details={'operation': 'deepcopy'}
        )

    def __reduce_ex__(self, protocol):
        raise SingletonError(
            f"{self.__class__.__name__} cannot be pickled",
            details={'operation': 'pickle'}
        )
