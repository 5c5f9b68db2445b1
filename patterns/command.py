"""
Command pattern: requests bound at construction, executed later by an invoker.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional
from utils.logging_config import get_logger

if TYPE_CHECKING:
    from infrastructure.observability import MetricsCollector

logger = get_logger(__name__)


class Command(ABC):
    """Abstract command base class."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the bound action."""
        pass


class SimpleCommand(Command):
    """Command that does its small job on its own."""

    def __init__(self, payload: str):
        self._payload = payload
        self.history: List[str] = []

    @property
    def payload(self) -> str:
        return self._payload

    def execute(self) -> None:
        line = f"SimpleCommand: See, I can do simple things like printing ({self._payload})"
        self.history.append(line)
        logger.info(line)


class Receiver:
    """Holds the business logic that complex commands delegate to."""

    def __init__(self):
        self.history: List[str] = []
        self.logger = get_logger(self.__class__.__name__)

    def do_something(self, a: str):
        line = f"Receiver: Working on ({a}.)"
        self.history.append(line)
        self.logger.info(line)

    def do_something_else(self, b: str):
        line = f"Receiver: Also working on ({b}.)"
        self.history.append(line)
        self.logger.info(line)


class ComplexCommand(Command):
    """Command that passes its captured arguments on to a receiver."""

    def __init__(self, receiver: Receiver, a: str, b: str):
        self._receiver = receiver
        self._a = a
        self._b = b
        self.history: List[str] = []

    @property
    def receiver(self) -> Receiver:
        return self._receiver

    def execute(self) -> None:
        line = "ComplexCommand: Complex stuff should be done by a receiver object."
        self.history.append(line)
        logger.info(line)
        self._receiver.do_something(self._a)
        self._receiver.do_something_else(self._b)


class Invoker:
    """
    Runs the on_start and on_finish commands around its own work.

    An empty slot is skipped; binding None clears a slot.
    """

    def __init__(self, metrics: Optional['MetricsCollector'] = None):
        self._on_start: Optional[Command] = None
        self._on_finish: Optional[Command] = None
        self.metrics = metrics
        self.logger = get_logger(self.__class__.__name__)

    def set_on_start(self, command: Optional[Command]):
        self._on_start = command
        self.logger.debug(f"Bound {command.__class__.__name__} to on_start")

    def set_on_finish(self, command: Optional[Command]):
        self._on_finish = command
        self.logger.debug(f"Bound {command.__class__.__name__} to on_finish")

    def _run(self, slot: str, command: Optional[Command]):
        if command is None:
            return
        command.execute()
        if self.metrics:
            self.metrics.inc_commands(slot=slot)

    def do_something_important(self) -> List[str]:
        """Run on_start, the invoker's own work, then on_finish."""
        trace = ["Invoker: Does anybody want something done before I begin?"]
        self._run('on_start', self._on_start)
        trace.append("Invoker: ...doing something really important...")
        trace.append("Invoker: Does anybody want something done after I finish?")
        self._run('on_finish', self._on_finish)
        for line in trace:
            self.logger.info(line)
        return trace
