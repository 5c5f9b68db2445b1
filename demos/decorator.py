"""Decorator demo: a plain component, then the same one wrapped three times."""
from typing import List, Optional
from config.settings import DemoSettings
from demos.runner import main_for
from infrastructure.observability import MetricsCollector
from patterns.decorator import (
    ConcreteComponent,
    ConcreteDecoratorA,
    ConcreteDecoratorB,
    ConcreteDecoratorC,
    client_code,
    decorate
)


def run(settings: Optional[DemoSettings] = None, metrics: Optional[MetricsCollector] = None) -> List[str]:
    simple = ConcreteComponent()
    decorated = decorate(simple, ConcreteDecoratorA, ConcreteDecoratorB, ConcreteDecoratorC)
    return [
        "Client: I've got a simple component:",
        client_code(simple),
        "",
        "Client: Now I've got a decorated component:",
        client_code(decorated),
    ]


def main() -> int:
    return main_for('decorator', run)


if __name__ == "__main__":
    raise SystemExit(main())
