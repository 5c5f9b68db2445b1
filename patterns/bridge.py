"""
Bridge pattern: abstractions and implementations varying independently.
"""
from abc import ABC, abstractmethod


class Implementation(ABC):
    """Primitive operations every platform provides."""

    @abstractmethod
    def operation_implementation(self) -> str:
        pass


class ConcreteImplementationA(Implementation):

    def operation_implementation(self) -> str:
        return "ConcreteImplementationA: Here's the result on the platform A.\n"


class ConcreteImplementationB(Implementation):

    def operation_implementation(self) -> str:
        return "ConcreteImplementationB: Here's the result on the platform B.\n"


class Abstraction:
    """High-level control layer that delegates to an implementation."""

    def __init__(self, implementation: Implementation):
        self._implementation = implementation

    @property
    def implementation(self) -> Implementation:
        return self._implementation

    def operation(self) -> str:
        return "Abstraction: Base operation with:\n" + self._implementation.operation_implementation()


class ExtendedAbstraction(Abstraction):

    def operation(self) -> str:
        return "ExtendedAbstraction: Extended operation with:\n" + self._implementation.operation_implementation()


def client_code(abstraction: Abstraction) -> str:
    """Client code only depends on the Abstraction interface."""
    return abstraction.operation()
