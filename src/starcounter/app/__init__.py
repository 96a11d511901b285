"""
Application Service Layer

Dispatcher, Unit of Work and event bus between the core entities and the
web adapters.
"""

from .bus import EventBus, InProcessBus, log_command
from .dispatcher import Dispatcher
from .uow import UnitOfWork

__all__ = [
    "EventBus",
    "InProcessBus",
    "log_command",
    "Dispatcher",
    "UnitOfWork",
]
