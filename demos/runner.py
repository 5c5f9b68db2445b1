"""
Shared driver plumbing: settings, logging setup, metrics and timing.
"""
from typing import Any, Callable, Dict, Iterable, List, Optional
from config.settings import DemoSettings, load_settings
from infrastructure.observability import MetricsCollector, Timer
from utils.logging_config import LoggerFactory, LogContext, get_logger
from utils.error_handlers import ErrorContext

logger = get_logger(__name__)

DemoFunc = Callable[[Optional[DemoSettings], Optional[MetricsCollector]], List[str]]


def setup(settings: Optional[DemoSettings] = None) -> DemoSettings:
    """Load settings (when not given) and configure logging from them."""
    settings = settings or load_settings()
    LoggerFactory.configure(
        log_dir=settings.log_dir,
        log_level=settings.log_level,
        enable_file=settings.log_to_file,
        enable_structured=settings.structured_logging,
        force=True
    )
    return settings


def create_metrics(settings: DemoSettings) -> Optional[MetricsCollector]:
    if not settings.use_metrics:
        return None
    return MetricsCollector()


def run_demos(
    demos: Dict[str, DemoFunc],
    names: Iterable[str],
    settings: DemoSettings,
    metrics: Optional[MetricsCollector] = None,
    echo: Callable[[str], None] = print
) -> List[Dict[str, Any]]:
    """
    Run the named demos in order and echo their trace lines.

    A failing demo is logged and skipped. Returns one structured failure
    per failed demo: the demo name plus the error's to_dict() fields.
    """
    failures = []
    for name in names:
        demo = demos[name]
        with LogContext(logger, demo=name):
            with ErrorContext(name, raise_on_error=False) as context:
                with Timer(metrics):
                    lines = demo(settings, metrics)
                echo(f"===== {name} =====")
                for line in lines:
                    echo(line)
                echo("")
        if context.failed:
            failures.append({'demo': name, **context.error})
    return failures


def main_for(name: str, demo: DemoFunc) -> int:
    """Entry point body for a single demo module."""
    settings = setup()
    metrics = create_metrics(settings)
    failures = run_demos({name: demo}, [name], settings, metrics)
    return 1 if failures else 0
