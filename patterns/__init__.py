"""
Classic object-oriented design patterns.
"""
from .command import (
    Command,
    SimpleCommand,
    Receiver,
    ComplexCommand,
    Invoker
)
from .bridge import (
    Implementation,
    ConcreteImplementationA,
    ConcreteImplementationB,
    Abstraction,
    ExtendedAbstraction
)
from .flyweight import (
    SharedState,
    UniqueState,
    Flyweight,
    FlyweightFactory,
    add_car_to_database
)
from .prototype import (
    PrototypeType,
    Prototype,
    ConcretePrototype1,
    ConcretePrototype2,
    PrototypeFactory
)
from .observer import (
    Observer,
    Publisher,
    NumberedObserver,
    CallbackObserver
)
from .strategy import (
    Strategy,
    AscendingSortStrategy,
    DescendingSortStrategy,
    StrategyOutcome,
    Context
)
from .decorator import (
    Component,
    ConcreteComponent,
    Decorator,
    ConcreteDecoratorA,
    ConcreteDecoratorB,
    ConcreteDecoratorC,
    decorate
)
from .singleton import (
    Singleton,
    SingletonMeta
)

__all__ = [
    'Command',
    'SimpleCommand',
    'Receiver',
    'ComplexCommand',
    'Invoker',
    'Implementation',
    'ConcreteImplementationA',
    'ConcreteImplementationB',
    'Abstraction',
    'ExtendedAbstraction',
    'SharedState',
    'UniqueState',
    'Flyweight',
    'FlyweightFactory',
    'add_car_to_database',
    'PrototypeType',
    'Prototype',
    'ConcretePrototype1',
    'ConcretePrototype2',
    'PrototypeFactory',
    'Observer',
    'Publisher',
    'NumberedObserver',
    'CallbackObserver',
    'Strategy',
    'AscendingSortStrategy',
    'DescendingSortStrategy',
    'StrategyOutcome',
    'Context',
    'Component',
    'ConcreteComponent',
    'Decorator',
    'ConcreteDecoratorA',
    'ConcreteDecoratorB',
    'ConcreteDecoratorC',
    'decorate',
    'Singleton',
    'SingletonMeta',
]
