"""
StarCounter Core Module

Domain layer: the counter state and store, plus the reactive entity base,
event metadata and signal descriptors.
"""

from .state import CounterState, DEFAULT_MAX_COUNT
from .store import CounterStore
from .entity import Entity, datastar_script
from .events import event, EventInfo
from .signals import SignalDescriptor, EventMethodDescriptor

__all__ = [
    "CounterState",
    "DEFAULT_MAX_COUNT",
    "CounterStore",
    "Entity",
    "datastar_script",
    "event",
    "EventInfo",
    "SignalDescriptor",
    "EventMethodDescriptor",
]
