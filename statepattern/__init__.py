"""
An illustration of the State design pattern.

A Context delegates its requests to the State it currently holds, and states
may switch the Context into another state while handling a request. Every
notable action is emitted as a trace line through the ``logging`` module and
an optional observer callback.
"""

from .base import State
from .context import Context
from .exceptions import DetachedStateError, StateNotSetError, StatePatternError
from .observers import TraceRecorder, console_observer
from .states import ConcreteStateA, ConcreteStateB

__version__ = "0.1.0"

__all__ = [
    "State",
    "Context",
    "ConcreteStateA",
    "ConcreteStateB",
    "TraceRecorder",
    "console_observer",
    "StatePatternError",
    "StateNotSetError",
    "DetachedStateError",
]
