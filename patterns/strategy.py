"""
Strategy pattern for interchangeable algorithms.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional
from utils.logging_config import get_logger

if TYPE_CHECKING:
    from infrastructure.observability import MetricsCollector

logger = get_logger(__name__)


class Strategy(ABC):
    """Abstract strategy base class."""

    @abstractmethod
    def do_algorithm(self, data: str) -> str:
        """Transform the data."""
        pass


class AscendingSortStrategy(Strategy):
    """Sort characters in ascending order."""

    def do_algorithm(self, data: str) -> str:
        return ''.join(sorted(data))


class DescendingSortStrategy(Strategy):
    """Sort characters in descending order."""

    def do_algorithm(self, data: str) -> str:
        return ''.join(sorted(data, reverse=True))


@dataclass(frozen=True)
class StrategyOutcome:
    """Result of one business logic run; result is None when no strategy was set."""
    strategy_name: Optional[str]
    result: Optional[str]

    @property
    def is_unset(self) -> bool:
        return self.strategy_name is None


class Context:
    """Context that uses a strategy."""

    def __init__(
        self,
        strategy: Optional[Strategy] = None,
        metrics: Optional['MetricsCollector'] = None
    ):
        self._strategy = strategy
        self.metrics = metrics
        self.logger = get_logger(self.__class__.__name__)

    @property
    def strategy(self) -> Optional[Strategy]:
        """Get current strategy."""
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Optional[Strategy]):
        """Set new strategy."""
        self.logger.info(f"Switching strategy to {strategy.__class__.__name__}")
        self._strategy = strategy

    def set_strategy(self, strategy: Optional[Strategy]):
        self.strategy = strategy

    def do_some_business_logic(self, text: str) -> StrategyOutcome:
        """Run the current strategy over text, or report that none is set."""
        if self._strategy is None:
            self.logger.info("Context: Strategy isn't set")
            if self.metrics:
                self.metrics.inc_strategy_runs()
            return StrategyOutcome(strategy_name=None, result=None)

        self.logger.info("Context: Sorting data using the strategy (not sure how it will do it)")
        name = self._strategy.__class__.__name__
        result = self._strategy.do_algorithm(text)
        if self.metrics:
            self.metrics.inc_strategy_runs(strategy=name)
        return StrategyOutcome(strategy_name=name, result=result)
