"""
Test framework for state pattern testing using 4-layer architecture.
"""

from .dsl import StateMachineDsl
from .drivers import DriverInterface, ObserverDriver, LoggingDriver
from .multi_driver_base import MultiDriverTestBase

__all__ = [
    'StateMachineDsl',
    'DriverInterface',
    'ObserverDriver',
    'LoggingDriver',
    'MultiDriverTestBase',
]
