"""Observability infrastructure backed by Prometheus metrics."""
from __future__ import annotations
import time
from typing import Dict, Optional

from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry, generate_latest


class MetricsCollector:
    """
    Metrics collector for pattern events.

    Every collector owns a private registry, so several collectors with the
    same namespace can live in one process.
    """
    def __init__(self, namespace: str = 'patterns'):
        self.namespace = namespace
        self.registry = CollectorRegistry()
        self._init_prometheus_metrics()

    def _init_prometheus_metrics(self):
        """Initialize Prometheus metrics."""
        # Counters
        self.commands = Counter(
            f'{self.namespace}_commands_executed_total',
            'Total number of executed commands',
            ['slot'],
            registry=self.registry
        )

        self.notifications = Counter(
            f'{self.namespace}_notifications_delivered_total',
            'Total number of observer updates delivered',
            registry=self.registry
        )

        self.flyweight_lookups = Counter(
            f'{self.namespace}_flyweight_lookups_total',
            'Flyweight factory lookups by outcome',
            ['outcome'],
            registry=self.registry
        )

        self.prototype_clones = Counter(
            f'{self.namespace}_prototype_clones_total',
            'Total number of prototypes cloned',
            ['tag'],
            registry=self.registry
        )

        self.strategy_runs = Counter(
            f'{self.namespace}_strategy_runs_total',
            'Business logic runs by strategy',
            ['strategy'],
            registry=self.registry
        )

        # Histograms
        self.demo_duration = Histogram(
            f'{self.namespace}_demo_duration_seconds',
            'Demo run duration in seconds',
            registry=self.registry
        )

        # Gauges
        self.flyweights_cached = Gauge(
            f'{self.namespace}_flyweights_cached',
            'Distinct flyweights held by the factory',
            registry=self.registry
        )

    def inc_commands(self, slot: str = 'direct', amount: float = 1.0):
        """Increment executed commands counter."""
        self.commands.labels(slot=slot).inc(amount)

    def inc_notifications(self, amount: float = 1.0):
        """Increment delivered notifications counter."""
        self.notifications.inc(amount)

    def inc_flyweight_hits(self, amount: float = 1.0):
        """Increment flyweight cache hits."""
        self.flyweight_lookups.labels(outcome='hit').inc(amount)

    def inc_flyweight_misses(self, amount: float = 1.0):
        """Increment flyweight cache misses."""
        self.flyweight_lookups.labels(outcome='miss').inc(amount)

    def set_flyweights_cached(self, count: int):
        """Set number of cached flyweights."""
        self.flyweights_cached.set(count)

    def inc_prototype_clones(self, tag: str = 'unknown', amount: float = 1.0):
        """Increment prototype clones counter."""
        self.prototype_clones.labels(tag=tag).inc(amount)

    def inc_strategy_runs(self, strategy: str = 'unset', amount: float = 1.0):
        """Increment strategy runs counter."""
        self.strategy_runs.labels(strategy=strategy).inc(amount)

    def observe_demo_duration(self, duration: float):
        """Record demo duration."""
        self.demo_duration.observe(duration)

    def get_value(self, sample: str, labels: Optional[Dict[str, str]] = None) -> float:
        """
        Read one sample from the registry.

        Args:
            sample: Sample name without the namespace, e.g. 'commands_executed_total'
            labels: Label values identifying the series

        Returns:
            The sample value, or 0.0 when the series has not been touched yet
        """
        value = self.registry.get_sample_value(f'{self.namespace}_{sample}', labels or {})
        return 0.0 if value is None else value

    def get_metrics(self) -> str:
        """Get metrics in Prometheus text format."""
        return generate_latest(self.registry).decode('utf-8')


class Timer:
    """Context manager for timing code blocks."""
    def __init__(self, metrics_collector: Optional[MetricsCollector] = None):
        self.metrics_collector = metrics_collector
        self.start_time = None
        self.duration = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time

        if self.metrics_collector:
            self.metrics_collector.observe_demo_duration(self.duration)
