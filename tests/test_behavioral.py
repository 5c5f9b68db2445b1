"""Tests for the behavioral patterns: command, observer, strategy."""
import pytest
from infrastructure import MetricsCollector
from patterns.command import Command, ComplexCommand, Invoker, Receiver, SimpleCommand
from patterns.observer import CallbackObserver, NumberedObserver, Observer, Publisher
from patterns.strategy import AscendingSortStrategy, Context, DescendingSortStrategy


class RecordingCommand(Command):
    """Command that appends its name to a shared log."""

    def __init__(self, name, log):
        self.name = name
        self.log = log

    def execute(self):
        self.log.append(self.name)


class TestCommand:
    """Tests for commands and the invoker."""

    def test_simple_command_uses_captured_payload(self):
        """Test the payload bound at construction is used on execute."""
        command = SimpleCommand("Say Hi!")
        command.execute()
        assert command.history == [
            "SimpleCommand: See, I can do simple things like printing (Say Hi!)"
        ]

    def test_complex_command_delegates_to_receiver(self):
        """Test receiver operations run in order with the captured arguments."""
        receiver = Receiver()
        ComplexCommand(receiver, "Send email", "Save report").execute()
        assert receiver.history == [
            "Receiver: Working on (Send email.)",
            "Receiver: Also working on (Save report.)",
        ]

    def test_invoker_runs_slots_in_order(self):
        """Test on_start runs before on_finish."""
        log = []
        invoker = Invoker()
        invoker.set_on_finish(RecordingCommand('finish', log))
        invoker.set_on_start(RecordingCommand('start', log))

        trace = invoker.do_something_important()

        assert log == ['start', 'finish']
        assert trace[1] == "Invoker: ...doing something really important..."

    def test_unbound_slots_are_noops(self):
        """Test an invoker without commands still does its work."""
        trace = Invoker().do_something_important()
        assert len(trace) == 3

    def test_binding_none_clears_slot(self):
        """Test a cleared slot is skipped on the next run."""
        log = []
        invoker = Invoker()
        invoker.set_on_start(RecordingCommand('start', log))
        invoker.set_on_start(None)
        invoker.do_something_important()
        assert log == []

    def test_metrics_count_executed_commands(self):
        """Test only bound slots are counted."""
        metrics = MetricsCollector()
        invoker = Invoker(metrics=metrics)
        invoker.set_on_start(SimpleCommand("x"))
        invoker.do_something_important()
        assert metrics.get_value('commands_executed_total', {'slot': 'on_start'}) == 1
        assert metrics.get_value('commands_executed_total', {'slot': 'on_finish'}) == 0


class TestObserver:
    """Tests for the publisher and its observers."""

    def _recorder(self, name, log):
        return CallbackObserver(lambda message: log.append((name, message)))

    def test_notify_in_subscription_order(self):
        """Test observers are called in the order they attached."""
        log = []
        publisher = Publisher()
        a, b, c = (self._recorder(n, log) for n in 'ABC')
        for observer in (a, b, c):
            publisher.attach(observer)

        publisher.create_message("hello")

        assert log == [('A', 'hello'), ('B', 'hello'), ('C', 'hello')]

    def test_detach_removes_from_later_notifications(self):
        """Test a detached observer is no longer notified."""
        log = []
        publisher = Publisher()
        a, b, c = (self._recorder(n, log) for n in 'ABC')
        for observer in (a, b, c):
            publisher.attach(observer)

        publisher.detach(b)
        publisher.notify()

        assert [name for name, _ in log] == ['A', 'C']

    def test_detach_unknown_observer_is_noop(self):
        """Test detaching a never-attached observer leaves the list unchanged."""
        publisher = Publisher()
        attached = CallbackObserver(lambda message: None)
        publisher.attach(attached)

        publisher.detach(CallbackObserver(lambda message: None))

        assert publisher.observers == (attached,)

    def test_duplicates_and_first_match_removal(self):
        """Test duplicates are kept and detach removes only one entry."""
        log = []
        publisher = Publisher()
        a = self._recorder('A', log)
        publisher.attach(a)
        publisher.attach(a)
        publisher.notify()
        assert len(log) == 2

        publisher.detach(a)
        assert publisher.observers == (a,)

    def test_self_detach_during_notify(self):
        """Test an observer leaving mid-notification does not disturb the round."""
        log = []
        publisher = Publisher()

        class Leaver(Observer):
            def update(self, message):
                log.append(('leaver', message))
                publisher.detach(self)

        publisher.attach(Leaver())
        publisher.attach(self._recorder('B', log))

        publisher.create_message("first")
        publisher.create_message("second")

        assert log == [('leaver', 'first'), ('B', 'first'), ('B', 'second')]

    def test_failing_observer_does_not_block_others(self):
        """Test an exception in one observer is logged and delivery continues."""
        log = []
        publisher = Publisher()

        def explode(message):
            raise RuntimeError("boom")

        publisher.attach(CallbackObserver(explode))
        publisher.attach(self._recorder('B', log))
        publisher.notify()

        assert log == [('B', '')]

    def test_numbered_observer_lifecycle(self):
        """Test numbered observers self-register and count upwards."""
        publisher = Publisher()
        first = NumberedObserver(publisher)
        second = NumberedObserver(publisher)

        assert second.number == first.number + 1
        assert publisher.how_many_observers() == 2

        publisher.some_business_logic()
        assert first.message_from_publisher == "change message message"

        first.remove_me_from_the_list()
        publisher.create_message()
        assert first.received == ["change message message"]
        assert second.received == ["change message message", "Empty"]

    def test_metrics_count_deliveries(self):
        """Test each delivered update is counted."""
        metrics = MetricsCollector()
        publisher = Publisher(metrics=metrics)
        NumberedObserver(publisher)
        NumberedObserver(publisher)
        publisher.create_message("hi")
        assert metrics.get_value('notifications_delivered_total') == 2


class TestStrategy:
    """Tests for the strategy context."""

    def test_ascending(self):
        """Test ascending sort."""
        outcome = Context(AscendingSortStrategy()).do_some_business_logic("haegicbjdf")
        assert outcome.result == "abcdefghij"
        assert outcome.strategy_name == "AscendingSortStrategy"

    def test_descending(self):
        """Test descending sort."""
        outcome = Context(DescendingSortStrategy()).do_some_business_logic("haegicbjdf")
        assert outcome.result == "jihgfedcba"

    def test_unset_strategy_is_reported(self):
        """Test running without a strategy reports the unset state."""
        outcome = Context().do_some_business_logic("haegicbjdf")
        assert outcome.is_unset
        assert outcome.result is None

    def test_swap_strategy(self):
        """Test the strategy can be replaced and cleared at any time."""
        context = Context(AscendingSortStrategy())
        context.set_strategy(DescendingSortStrategy())
        assert context.do_some_business_logic("abc").result == "cba"

        context.strategy = None
        assert context.do_some_business_logic("abc").is_unset

    def test_metrics_count_runs(self):
        """Test runs are counted per strategy."""
        metrics = MetricsCollector()
        context = Context(metrics=metrics)
        context.do_some_business_logic("ab")
        context.strategy = AscendingSortStrategy()
        context.do_some_business_logic("ab")

        assert metrics.get_value('strategy_runs_total', {'strategy': 'unset'}) == 1
        assert metrics.get_value('strategy_runs_total', {'strategy': 'AscendingSortStrategy'}) == 1
