"""
Prototype pattern: produce new objects by cloning registered originals.
"""
import copy
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Dict, Hashable, List, Optional
from utils.logging_config import get_logger
from utils.exceptions import UnknownPrototypeError

if TYPE_CHECKING:
    from infrastructure.observability import MetricsCollector

logger = get_logger(__name__)


class PrototypeType(Enum):
    PROTOTYPE_1 = 0
    PROTOTYPE_2 = 1


class Prototype(ABC):
    """Abstract prototype base class."""

    def __init__(self, name: str = "", field: float = 0.0):
        self.name = name
        self.field = field

    @abstractmethod
    def clone(self) -> 'Prototype':
        """Return a fully independent copy of this object."""
        pass

    def method(self, field: float) -> str:
        self.field = field
        line = f"Call Method from {self.name} with field : {field}"
        logger.info(line)
        return line

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.__dict__!r})"


class ConcretePrototype1(Prototype):

    def __init__(self, name: str, concrete_field: float):
        super().__init__(name)
        self.concrete_field1 = concrete_field

    def clone(self) -> 'ConcretePrototype1':
        return copy.deepcopy(self)


class ConcretePrototype2(Prototype):

    def __init__(self, name: str, concrete_field: float):
        super().__init__(name)
        self.concrete_field2 = concrete_field

    def clone(self) -> 'ConcretePrototype2':
        return copy.deepcopy(self)


class PrototypeFactory:
    """
    Registry of canonical prototypes, one per tag.

    Callers only ever receive clones; the canonical instances never leave
    the factory.
    """

    def __init__(self, metrics: Optional['MetricsCollector'] = None):
        self._prototypes: Dict[Hashable, Prototype] = {
            PrototypeType.PROTOTYPE_1: ConcretePrototype1("PROTOTYPE_1", 50.0),
            PrototypeType.PROTOTYPE_2: ConcretePrototype2("PROTOTYPE_2", 60.0),
        }
        self.metrics = metrics
        self.logger = get_logger(self.__class__.__name__)

    def register(self, tag: Hashable, prototype: Prototype):
        """Register or replace the canonical prototype for a tag."""
        self._prototypes[tag] = prototype.clone()
        self.logger.debug(f"Registered {prototype.__class__.__name__} as {tag}")

    def create_prototype(self, tag: Hashable) -> Prototype:
        """Clone the canonical prototype registered for tag."""
        if tag not in self._prototypes:
            raise UnknownPrototypeError(
                f"Unknown prototype: {tag}",
                details={'available_types': [str(t) for t in self._prototypes]}
            )

        clone = self._prototypes[tag].clone()
        if self.metrics:
            self.metrics.inc_prototype_clones(tag=getattr(tag, 'name', str(tag)))
        return clone

    def list_available(self) -> List[Hashable]:
        """List all registered tags."""
        return list(self._prototypes.keys())
