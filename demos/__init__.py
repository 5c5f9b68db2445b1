"""
Runnable demonstrations, one per pattern.
"""
from . import bridge, command, decorator, flyweight, observer, prototype, singleton, strategy

DEMOS = {
    'command': command.run,
    'bridge': bridge.run,
    'flyweight': flyweight.run,
    'prototype': prototype.run,
    'observer': observer.run,
    'strategy': strategy.run,
    'decorator': decorator.run,
    'singleton': singleton.run,
}

__all__ = ['DEMOS']
