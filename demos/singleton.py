"""Singleton demo: threads racing for first access."""
import threading
import time
from typing import List, Optional, Type
from config.settings import DemoSettings
from demos.runner import main_for
from infrastructure.observability import MetricsCollector
from patterns.singleton import Singleton


def run(
    settings: Optional[DemoSettings] = None,
    metrics: Optional[MetricsCollector] = None,
    singleton_cls: Type[Singleton] = Singleton
) -> List[str]:
    settings = settings or DemoSettings()
    values = settings.singleton_values
    barrier = threading.Barrier(len(values))
    results: List[Optional[str]] = [None] * len(values)

    def worker(index: int, value: str):
        time.sleep(settings.singleton_start_delay)
        barrier.wait()
        results[index] = singleton_cls.get_instance(value).value

    threads = [
        threading.Thread(target=worker, args=(i, value), name=f"singleton-{value}")
        for i, value in enumerate(values)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    return [
        "If you see the same value, then singleton was reused (yay!",
        "If you see different values, then 2 singletons were created (booo!!)",
        "",
        "RESULT:",
        *results,
    ]


def main() -> int:
    return main_for('singleton', run)


if __name__ == "__main__":
    raise SystemExit(main())
