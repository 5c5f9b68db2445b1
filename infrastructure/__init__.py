from .observability import MetricsCollector, Timer

__all__ = [
    'MetricsCollector',
    'Timer'
]
