"""
Decorator pattern: wrap components to extend their behaviour.
"""
from abc import ABC, abstractmethod
from typing import Type


class Component(ABC):

    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteComponent(Component):

    def operation(self) -> str:
        return "ConcreteComponent"


class Decorator(Component):
    """
    Base decorator owning exactly one wrapped component.

    The default operation forwards to the wrapped component unchanged.
    Decorators are components themselves, so chains can wrap chains.
    """

    def __init__(self, component: Component):
        self._component = component

    @property
    def component(self) -> Component:
        return self._component

    def operation(self) -> str:
        return self._component.operation()


class ConcreteDecoratorA(Decorator):

    def operation(self) -> str:
        return f"ConcreteDecoratorA({super().operation()})"


class ConcreteDecoratorB(Decorator):

    def operation(self) -> str:
        return f"ConcreteDecoratorB({super().operation()})"


class ConcreteDecoratorC(Decorator):

    def operation(self) -> str:
        return f"ConcreteDecoratorC({super().operation()})"


def decorate(component: Component, *decorators: Type[Decorator]) -> Component:
    """Wrap component with each decorator class in turn, innermost first."""
    for decorator in decorators:
        component = decorator(component)
    return component


def client_code(component: Component) -> str:
    return f"RESULT: {component.operation()}"
