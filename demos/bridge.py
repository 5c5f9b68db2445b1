"""Bridge demo: each abstraction paired with a different platform."""
from typing import List, Optional
from config.settings import DemoSettings
from demos.runner import main_for
from infrastructure.observability import MetricsCollector
from patterns.bridge import (
    Abstraction,
    ConcreteImplementationA,
    ConcreteImplementationB,
    ExtendedAbstraction,
    client_code
)


def run(settings: Optional[DemoSettings] = None, metrics: Optional[MetricsCollector] = None) -> List[str]:
    trace = []
    for abstraction in (
        Abstraction(ConcreteImplementationA()),
        ExtendedAbstraction(ConcreteImplementationB()),
    ):
        trace.extend(client_code(abstraction).splitlines())
        trace.append("")
    return trace[:-1]


def main() -> int:
    return main_for('bridge', run)


if __name__ == "__main__":
    raise SystemExit(main())
