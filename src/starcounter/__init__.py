"""
StarCounter - Bounded Counter Screen for FastHTML

A counter with increment, decrement and reset, bounded between 0 and a
configurable maximum. The state transitions live in CounterStore; the
reactive Counter entity serves them to a Datastar-powered page.
"""

from .core import (
    CounterState, CounterStore, DEFAULT_MAX_COUNT,
    Entity, event, datastar_script,
)
from .counter import Counter, Notification, limit_reached_message
from .config import (
    ApplicationConfig, Environment, configure_logging,
    get_config, set_config, reset_config,
)
from .persistence import (
    EntityPersistenceBackend, MemoryRepo, get_memory_persistence,
    start_all_cleanup, stop_all_cleanup, configure_all_cleanup,
)
from .app import UnitOfWork, InProcessBus, Dispatcher

__all__ = [
    # Core
    'CounterState',
    'CounterStore',
    'DEFAULT_MAX_COUNT',
    'Entity',
    'event',
    'datastar_script',

    # Counter screen
    'Counter',
    'Notification',
    'limit_reached_message',

    # Configuration
    'ApplicationConfig',
    'Environment',
    'configure_logging',
    'get_config',
    'set_config',
    'reset_config',

    # Persistence
    'EntityPersistenceBackend',
    'MemoryRepo',
    'get_memory_persistence',
    'start_all_cleanup',
    'stop_all_cleanup',
    'configure_all_cleanup',

    # Application service layer
    'UnitOfWork',
    'InProcessBus',
    'Dispatcher',
]
