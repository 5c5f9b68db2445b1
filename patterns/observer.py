"""
Observer pattern: a publisher pushing messages to its subscribers.
"""
import itertools
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple
from utils.logging_config import get_logger

if TYPE_CHECKING:
    from infrastructure.observability import MetricsCollector

logger = get_logger(__name__)


class Observer(ABC):
    """Abstract observer base class."""

    @abstractmethod
    def update(self, message: str):
        """Called with the publisher's current message."""
        pass


class Publisher:
    """
    Subject that keeps an ordered subscriber list.

    notify() walks a snapshot of the list taken when it starts, so observers
    may attach or detach (themselves included) from inside update(); the
    change applies from the next notification.
    """

    def __init__(self, metrics: Optional['MetricsCollector'] = None):
        self._observers: List[Observer] = []
        self._message = ""
        self.metrics = metrics
        self.logger = get_logger(self.__class__.__name__)
        self.logger.debug("Publisher: Hi.")

    @property
    def message(self) -> str:
        return self._message

    @property
    def observers(self) -> Tuple[Observer, ...]:
        return tuple(self._observers)

    def attach(self, observer: Observer):
        """Append an observer; the same observer may be attached twice."""
        self._observers.append(observer)
        self.logger.debug(f"Attached observer {observer!r}")

    def detach(self, observer: Observer):
        """Remove the first matching entry; unknown observers are ignored."""
        try:
            self._observers.remove(observer)
        except ValueError:
            return
        self.logger.debug(f"Detached observer {observer!r}")

    def how_many_observers(self) -> int:
        count = len(self._observers)
        self.logger.info(f"There are {count} observers in the list.")
        return count

    def notify(self):
        """Deliver the current message to every attached observer, in order."""
        snapshot = list(self._observers)
        self.how_many_observers()

        for observer in snapshot:
            try:
                observer.update(self._message)
            except Exception as e:
                self.logger.error(f"Error notifying observer: {e}", exc_info=True)
                continue
            if self.metrics:
                self.metrics.inc_notifications()

    def create_message(self, message: str = "Empty"):
        self._message = message
        self.notify()

    def some_business_logic(self):
        self._message = "change message message"
        self.notify()
        self.logger.info("I'm about to do something important")


class NumberedObserver(Observer):
    """Observer that subscribes itself and carries a sequence number."""

    _counter = itertools.count(1)
    _counter_lock = threading.Lock()

    def __init__(self, publisher: Publisher):
        self._publisher = publisher
        with NumberedObserver._counter_lock:
            self.number = next(NumberedObserver._counter)
        self.message_from_publisher: Optional[str] = None
        self.received: List[str] = []
        self._publisher.attach(self)
        logger.info(f'Observer "{self.number}" has been added to the list.')

    def update(self, message: str):
        self.message_from_publisher = message
        self.received.append(message)
        logger.info(self.info())

    def remove_me_from_the_list(self):
        self._publisher.detach(self)
        logger.info(f'Observer "{self.number}" has been removed from the list.')

    def info(self) -> str:
        return f'Observer "{self.number}": a new message is available --> {self.message_from_publisher}'

    def __repr__(self) -> str:
        return f"NumberedObserver({self.number})"


class CallbackObserver(Observer):
    """Observer that calls a callback function."""

    def __init__(self, callback: Callable[[str], None]):
        self.callback = callback

    def update(self, message: str):
        """Call the callback function."""
        self.callback(message)
