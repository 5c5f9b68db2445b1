"""Command demo: an invoker running commands before and after its work."""
from typing import List, Optional
from config.settings import DemoSettings
from demos.runner import main_for
from infrastructure.observability import MetricsCollector
from patterns.command import ComplexCommand, Invoker, Receiver, SimpleCommand


def run(settings: Optional[DemoSettings] = None, metrics: Optional[MetricsCollector] = None) -> List[str]:
    settings = settings or DemoSettings()
    a, b = settings.command_receiver_args

    invoker = Invoker(metrics=metrics)
    simple = SimpleCommand(settings.command_payload)
    invoker.set_on_start(simple)
    receiver = Receiver()
    complex_command = ComplexCommand(receiver, a, b)
    invoker.set_on_finish(complex_command)

    before, working, after = invoker.do_something_important()
    return [
        before,
        *simple.history,
        working,
        after,
        *complex_command.history,
        *receiver.history,
    ]


def main() -> int:
    return main_for('command', run)


if __name__ == "__main__":
    raise SystemExit(main())
