"""Flyweight demo: a car database sharing model data between cars."""
from typing import List, Optional
from config.settings import DemoSettings
from demos.runner import main_for
from infrastructure.observability import MetricsCollector
from patterns.flyweight import FlyweightFactory, SharedState, add_car_to_database


def _listing(factory: FlyweightFactory) -> List[str]:
    keys = factory.list_flyweights()
    return [f"FlyweightFactory: I have {len(keys)} flyweights:", *keys]


def run(settings: Optional[DemoSettings] = None, metrics: Optional[MetricsCollector] = None) -> List[str]:
    settings = settings or DemoSettings()
    factory = FlyweightFactory(
        (SharedState(*fields) for fields in settings.flyweight_seed),
        metrics=metrics
    )

    trace = _listing(factory)
    for plates, owner, brand, model, color in settings.flyweight_cars:
        trace.append("")
        trace.append("Client: Adding a car to the database.")
        reused = SharedState(brand, model, color) in factory
        trace.append(
            "FlyweightFactory: Reusing existing flyweight." if reused
            else "FlyweightFactory: Cannot find a flyweight, creating new one."
        )
        trace.append(add_car_to_database(factory, plates, owner, brand, model, color))

    trace.append("")
    trace.extend(_listing(factory))
    return trace


def main() -> int:
    return main_for('flyweight', run)


if __name__ == "__main__":
    raise SystemExit(main())
