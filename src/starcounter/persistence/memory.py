"""
In-memory session storage.

Entities live for the process lifetime or until their TTL expires. One
MemoryRepo instance is shared per process.
"""

import logging
import time
from typing import Dict, Optional, TYPE_CHECKING

from .base import EntityPersistenceBackend

if TYPE_CHECKING:
    from ..core.entity import Entity

logger = logging.getLogger(__name__)


class MemoryRepo(EntityPersistenceBackend):
    """Process-wide dict of live entities keyed by id."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            EntityPersistenceBackend.__init__(instance)
            instance._entities = {}
            instance._deadlines = {}
            cls._instance = instance
        return cls._instance

    def __init__(self):
        # state is set up once in __new__
        pass

    def _evict_if_expired(self, entity_id: str) -> bool:
        deadline = self._deadlines.get(entity_id)
        if deadline is None or time.time() <= deadline:
            return False
        self.delete(entity_id)
        return True

    def save(self, entity, ttl: Optional[int] = None) -> bool:
        try:
            self._entities[entity.id] = entity
            if ttl:
                self._deadlines[entity.id] = time.time() + ttl
            else:
                self._deadlines.pop(entity.id, None)
        except Exception:
            logger.exception("Could not store %r", entity)
            return False
        return True

    def load(self, entity_id: str) -> Optional['Entity']:
        if self._evict_if_expired(entity_id):
            return None
        return self._entities.get(entity_id)

    def delete(self, entity_id: str) -> bool:
        self._deadlines.pop(entity_id, None)
        return self._entities.pop(entity_id, None) is not None

    def exists(self, entity_id: str) -> bool:
        return self.load(entity_id) is not None

    def purge_expired(self) -> int:
        now = time.time()
        expired = [entity_id for entity_id, deadline in self._deadlines.items() if now > deadline]
        for entity_id in expired:
            self.delete(entity_id)
        return len(expired)

    def clear(self) -> None:
        """Drop every stored entity."""
        self._entities.clear()
        self._deadlines.clear()

    def __len__(self) -> int:
        return len(self._entities)


def get_memory_persistence() -> MemoryRepo:
    return MemoryRepo()
