"""Strategy demo: the same text sorted by two interchangeable strategies."""
from typing import List, Optional
from config.settings import DemoSettings
from demos.runner import main_for
from infrastructure.observability import MetricsCollector
from patterns.strategy import AscendingSortStrategy, Context, DescendingSortStrategy, StrategyOutcome


def _report(outcome: StrategyOutcome) -> List[str]:
    if outcome.is_unset:
        return ["Context: Strategy isn't set"]
    return ["Context: Sorting data using the strategy (not sure how it will do it)", outcome.result]


def run(settings: Optional[DemoSettings] = None, metrics: Optional[MetricsCollector] = None) -> List[str]:
    settings = settings or DemoSettings()
    text = settings.strategy_text

    context = Context(AscendingSortStrategy(), metrics=metrics)
    trace = ["Client: Strategy is set to sort in ascending order."]
    trace.extend(_report(context.do_some_business_logic(text)))

    trace.append("")
    context.set_strategy(DescendingSortStrategy())
    trace.append("Client: Strategy is set to sort in descending order.")
    trace.extend(_report(context.do_some_business_logic(text)))
    return trace


def main() -> int:
    return main_for('strategy', run)


if __name__ == "__main__":
    raise SystemExit(main())
