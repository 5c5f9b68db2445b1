"""Observer demo: subscribers joining and leaving between messages."""
from typing import List, Optional
from config.settings import DemoSettings
from demos.runner import main_for
from infrastructure.observability import MetricsCollector
from patterns.observer import NumberedObserver, Publisher


def _publish(publisher: Publisher, message: str) -> List[str]:
    recipients = publisher.observers
    publisher.create_message(message)
    return [f"There are {len(recipients)} observers in the list."] + [
        observer.info() for observer in recipients
    ]


def _leave(observer: NumberedObserver) -> str:
    observer.remove_me_from_the_list()
    return f'Observer "{observer.number}" has been removed from the list.'


def _join(publisher: Publisher) -> NumberedObserver:
    return NumberedObserver(publisher)


def _joined(observer: NumberedObserver) -> str:
    return f'Observer "{observer.number}" has been added to the list.'


def run(settings: Optional[DemoSettings] = None, metrics: Optional[MetricsCollector] = None) -> List[str]:
    settings = settings or DemoSettings()
    first, second, third = settings.observer_messages
    publisher = Publisher(metrics=metrics)
    trace = []

    observer1 = _join(publisher)
    observer2 = _join(publisher)
    observer3 = _join(publisher)
    trace.extend(_joined(o) for o in (observer1, observer2, observer3))

    trace.extend(_publish(publisher, first))
    trace.append(_leave(observer3))

    trace.extend(_publish(publisher, second))
    observer4 = _join(publisher)
    trace.append(_joined(observer4))
    trace.append(_leave(observer2))
    observer5 = _join(publisher)
    trace.append(_joined(observer5))

    trace.extend(_publish(publisher, third))
    for observer in (observer5, observer4, observer1):
        trace.append(_leave(observer))

    return trace


def main() -> int:
    return main_for('observer', run)


if __name__ == "__main__":
    raise SystemExit(main())
