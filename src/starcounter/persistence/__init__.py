"""
Session storage for entities.

Entity classes register their backend on definition, so the app can switch
background cleanup on or off for all of them at once.
"""

from typing import List

from .base import EntityPersistenceBackend
from .memory import MemoryRepo, get_memory_persistence

_backends: List[EntityPersistenceBackend] = []


def register_backend(backend: EntityPersistenceBackend) -> None:
    if all(existing is not backend for existing in _backends):
        _backends.append(backend)


def configure_all_cleanup(enabled: bool = True, interval: int = 300) -> None:
    for backend in _backends:
        backend.configure_cleanup(enabled, interval)


def start_all_cleanup() -> None:
    """Start purge tasks; call from inside the running event loop."""
    for backend in _backends:
        backend.start_cleanup()


def stop_all_cleanup() -> None:
    for backend in _backends:
        backend.stop_cleanup()


__all__ = [
    "EntityPersistenceBackend",
    "MemoryRepo",
    "get_memory_persistence",
    "register_backend",
    "configure_all_cleanup",
    "start_all_cleanup",
    "stop_all_cleanup",
]
