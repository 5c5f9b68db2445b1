"""
Flyweight pattern: share intrinsic state between many logical objects.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional
from utils.logging_config import get_logger

if TYPE_CHECKING:
    from infrastructure.observability import MetricsCollector

logger = get_logger(__name__)


@dataclass(frozen=True)
class SharedState:
    """Intrinsic state cached by the factory."""
    brand: str
    model: str
    color: str

    def __str__(self) -> str:
        return f"[ {self.brand} , {self.model} , {self.color} ]"


@dataclass(frozen=True)
class UniqueState:
    """Extrinsic state supplied on every call."""
    owner: str
    plates: str

    def __str__(self) -> str:
        return f"[ {self.owner} , {self.plates} ]"


class Flyweight:
    """Holds one copy of shared state and combines it with unique state."""

    __slots__ = ('_shared_state',)

    def __init__(self, shared_state: SharedState):
        self._shared_state = shared_state

    @property
    def shared_state(self) -> SharedState:
        return self._shared_state

    def operation(self, unique_state: UniqueState) -> str:
        return (
            f"Flyweight: Displaying shared ({self._shared_state}) "
            f"and unique ({unique_state}) state."
        )


class FlyweightFactory:
    """
    Creates and caches flyweights keyed by their shared state.

    Identical brand/model/color triples always resolve to the same instance.
    Field values are not validated; empty strings are accepted.
    """

    def __init__(
        self,
        initial_states: Iterable[SharedState] = (),
        metrics: Optional['MetricsCollector'] = None
    ):
        self._flyweights: Dict[SharedState, Flyweight] = {}
        self.hits = 0
        self.misses = 0
        self.metrics = metrics
        self.logger = get_logger(self.__class__.__name__)

        for shared_state in initial_states:
            self._flyweights.setdefault(shared_state, Flyweight(shared_state))
        self._report_size()

    @staticmethod
    def get_key(shared_state: SharedState) -> str:
        """Display label for a cached entry; not used for lookups."""
        return f"{shared_state.brand}_{shared_state.model}_{shared_state.color}"

    def get_flyweight(self, shared_state: SharedState) -> Flyweight:
        """Return the cached flyweight for this state, creating it if needed."""
        flyweight = self._flyweights.get(shared_state)

        if flyweight is None:
            self.logger.info("FlyweightFactory: Cannot find a flyweight, creating new one.")
            flyweight = Flyweight(shared_state)
            self._flyweights[shared_state] = flyweight
            self.misses += 1
            if self.metrics:
                self.metrics.inc_flyweight_misses()
            self._report_size()
        else:
            self.logger.info("FlyweightFactory: Reusing existing flyweight.")
            self.hits += 1
            if self.metrics:
                self.metrics.inc_flyweight_hits()

        return flyweight

    def list_flyweights(self) -> List[str]:
        """Keys of every cached flyweight, in creation order."""
        return [self.get_key(shared_state) for shared_state in self._flyweights]

    def _report_size(self):
        if self.metrics:
            self.metrics.set_flyweights_cached(len(self._flyweights))

    def __len__(self) -> int:
        return len(self._flyweights)

    def __contains__(self, shared_state: SharedState) -> bool:
        return shared_state in self._flyweights

    def stats(self) -> dict:
        """Get lookup statistics."""
        total = self.hits + self.misses
        hit_rate = self.hits / total if total > 0 else 0.0
        return {
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': hit_rate,
            'size': len(self._flyweights)
        }


def add_car_to_database(
    factory: FlyweightFactory,
    plates: str,
    owner: str,
    brand: str,
    model: str,
    color: str
) -> str:
    """Register a car, reusing the factory's flyweight for its model."""
    flyweight = factory.get_flyweight(SharedState(brand, model, color))
    return flyweight.operation(UniqueState(owner, plates))
