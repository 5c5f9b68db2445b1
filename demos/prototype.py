"""Prototype demo: clone each registered prototype and use the copy."""
from typing import List, Optional
from config.settings import DemoSettings
from demos.runner import main_for
from infrastructure.observability import MetricsCollector
from patterns.prototype import PrototypeFactory, PrototypeType


def run(settings: Optional[DemoSettings] = None, metrics: Optional[MetricsCollector] = None) -> List[str]:
    settings = settings or DemoSettings()
    factory = PrototypeFactory(metrics=metrics)

    trace = []
    for number, (tag, value) in enumerate(zip(PrototypeType, settings.prototype_values), start=1):
        if trace:
            trace.append("")
        trace.append(f"Let's create Prototype {number}")
        prototype = factory.create_prototype(tag)
        trace.append(prototype.method(value))
    return trace


def main() -> int:
    return main_for('prototype', run)


if __name__ == "__main__":
    raise SystemExit(main())
