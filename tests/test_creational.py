"""Tests for the creational patterns: prototype, singleton."""
import copy
import pickle
import threading
import time
import pytest
from infrastructure import MetricsCollector
from patterns.prototype import (
    ConcretePrototype1,
    ConcretePrototype2,
    Prototype,
    PrototypeFactory,
    PrototypeType
)
from patterns.singleton import Singleton
from utils.exceptions import SingletonError, UnknownPrototypeError


class TestPrototype:
    """Tests for cloning and the prototype factory."""

    def test_clone_copies_fields(self):
        """Test a clone starts with the original's field values."""
        original = ConcretePrototype1("original", 7.5)
        original.method(3.0)
        clone = original.clone()

        assert clone is not original
        assert type(clone) is ConcretePrototype1
        assert (clone.name, clone.field, clone.concrete_field1) == ("original", 3.0, 7.5)

    def test_clone_is_independent(self):
        """Test mutating the original after cloning leaves the clone alone."""
        original = ConcretePrototype2("original", 1.0)
        original.tags = ['a']
        clone = original.clone()

        original.method(99.0)
        original.concrete_field2 = 2.0
        original.tags.append('b')

        assert clone.field == 0.0
        assert clone.concrete_field2 == 1.0
        assert clone.tags == ['a']

    def test_factory_returns_fresh_copies(self):
        """Test each request yields a new object with the canonical values."""
        factory = PrototypeFactory()
        first = factory.create_prototype(PrototypeType.PROTOTYPE_1)
        second = factory.create_prototype(PrototypeType.PROTOTYPE_1)

        assert first is not second
        first.method(90.0)
        assert second.field == 0.0
        assert factory.create_prototype(PrototypeType.PROTOTYPE_1).field == 0.0
        assert isinstance(factory.create_prototype(PrototypeType.PROTOTYPE_2), ConcretePrototype2)

    def test_unknown_tag_raises(self):
        """Test an unregistered tag fails explicitly."""
        with pytest.raises(UnknownPrototypeError) as exc_info:
            PrototypeFactory().create_prototype('PROTOTYPE_3')
        assert len(exc_info.value.details['available_types']) == 2

    def test_register_keeps_private_copy(self):
        """Test later changes to a registered object do not leak into the factory."""
        factory = PrototypeFactory()
        custom = ConcretePrototype1("custom", 5.0)
        factory.register('custom', custom)
        custom.name = "changed"

        assert factory.create_prototype('custom').name == "custom"
        assert 'custom' in factory.list_available()

    def test_metrics_count_clones(self):
        """Test clones are counted."""
        metrics = MetricsCollector()
        factory = PrototypeFactory(metrics=metrics)
        factory.create_prototype(PrototypeType.PROTOTYPE_1)
        factory.create_prototype(PrototypeType.PROTOTYPE_2)
        assert metrics.get_value('prototype_clones_total', {'tag': 'PROTOTYPE_1'}) == 1
        assert metrics.get_value('prototype_clones_total', {'tag': 'PROTOTYPE_2'}) == 1

    def test_base_prototype_is_abstract(self):
        """Test the base class cannot be instantiated without clone."""
        with pytest.raises(TypeError):
            Prototype("x")


class TestSingleton:
    """Tests for the thread-safe singleton."""

    def test_first_value_wins(self):
        """Test later arguments are ignored."""
        class Settings(Singleton):
            pass

        assert not Settings.is_initialized()
        first = Settings.get_instance("FOO")
        second = Settings.get_instance("BAR")

        assert first is second
        assert second.value == "FOO"
        assert Settings.is_initialized()

    def test_subclasses_have_own_instance(self):
        """Test every singleton class keeps its own instance."""
        class Left(Singleton):
            pass

        class Right(Singleton):
            pass

        assert Left.get_instance("L") is not Right.get_instance("R")
        assert Right.get_instance("x").value == "R"

    def test_concurrent_first_access(self):
        """Test racing first callers build exactly one instance."""
        class Slow(Singleton):
            constructions = 0

            def __init__(self, value):
                time.sleep(0.05)
                type(self).constructions += 1
                super().__init__(value)

        workers = 16
        barrier = threading.Barrier(workers)
        seen = []

        def call(value):
            barrier.wait()
            seen.append(Slow.get_instance(value))

        threads = [threading.Thread(target=call, args=(f"value-{i}",)) for i in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert Slow.constructions == 1
        assert len(seen) == workers
        assert len({id(instance) for instance in seen}) == 1
        assert len({instance.value for instance in seen}) == 1

    def test_copy_is_rejected(self):
        """Test copying or pickling cannot duplicate the instance."""
        class Guarded(Singleton):
            pass

        instance = Guarded.get_instance("only")
        with pytest.raises(SingletonError):
            copy.copy(instance)
        with pytest.raises(SingletonError):
            copy.deepcopy(instance)
        with pytest.raises(SingletonError):
            pickle.dumps(instance)
