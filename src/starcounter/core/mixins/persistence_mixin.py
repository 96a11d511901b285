"""
PersistenceMixin: Persistence operations without base model dependencies.
"""

from typing import Optional


class PersistenceMixin:
    """
    Persistence operations mixin.

    Provides save, delete, exists and get that work with any persistence
    backend through the entity's configuration.
    """

    @property
    def persistence_backend(self):
        """Get the persistence backend for this entity instance."""
        return self.persistence_backend_class()

    def save(self, ttl: Optional[int] = None) -> bool:
        """Save entity to configured backend."""
        return self.persistence_backend.save(self, ttl if ttl is not None else self.session_ttl())

    def delete(self) -> bool:
        """Delete entity from configured backend."""
        return self.persistence_backend.delete(self.id)

    def exists(self) -> bool:
        """Check if entity exists in configured backend."""
        return self.persistence_backend.exists(self.id)

    @classmethod
    def get(cls, req, **kwargs):
        """Get cached entity or create new."""
        entity_id = cls._get_id(req, **kwargs)

        cached = cls.persistence_backend_class().load(entity_id)
        if cached is not None and isinstance(cached, cls):
            return cached

        return cls(req, id=entity_id, **kwargs)
