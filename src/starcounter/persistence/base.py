"""
Session storage interface.

A backend keeps live entities by id, with an optional time-to-live, and can
run a periodic asyncio task that purges expired entries.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.entity import Entity

logger = logging.getLogger(__name__)

DEFAULT_CLEANUP_INTERVAL = 300


class EntityPersistenceBackend(ABC):
    """Keyed entity storage with TTL and a background purge task."""

    def __init__(self):
        self.cleanup_enabled = True
        self.cleanup_interval = DEFAULT_CLEANUP_INTERVAL
        self._cleanup_task: Optional[asyncio.Task] = None

    @abstractmethod
    def save(self, entity: 'Entity', ttl: Optional[int] = None) -> bool:
        """Store the entity under its id. Returns False if it could not be stored."""

    @abstractmethod
    def load(self, entity_id: str) -> Optional['Entity']:
        """The live entity, or None when missing or expired."""

    @abstractmethod
    def delete(self, entity_id: str) -> bool:
        """Drop the entity; True if it was stored."""

    @abstractmethod
    def exists(self, entity_id: str) -> bool:
        ...

    @abstractmethod
    def purge_expired(self) -> int:
        """Remove expired entries and return how many were removed."""

    def configure_cleanup(self, enabled: bool = True, interval: int = DEFAULT_CLEANUP_INTERVAL) -> None:
        restart = self.cleanup_running
        self.stop_cleanup()
        self.cleanup_enabled = enabled
        self.cleanup_interval = interval
        if restart:
            self.start_cleanup()

    def start_cleanup(self) -> None:
        """
        Start the purge task on the running event loop.

        Does nothing when cleanup is disabled, already running, or when called
        outside an event loop; request handlers call this on every action so
        the task starts with the first request.
        """
        if not self.cleanup_enabled or self.cleanup_running:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        self._cleanup_task = loop.create_task(self._purge_periodically())
        logger.debug("%s: purging expired entities every %ss", type(self).__name__, self.cleanup_interval)

    def stop_cleanup(self) -> None:
        if self._cleanup_task is not None:
            self._cleanup_task.cancel()
            self._cleanup_task = None

    @property
    def cleanup_running(self) -> bool:
        return self._cleanup_task is not None and not self._cleanup_task.done()

    async def _purge_periodically(self) -> None:
        while True:
            await asyncio.sleep(self.cleanup_interval)
            try:
                purged = self.purge_expired()
            except Exception:
                logger.exception("%s: purge failed", type(self).__name__)
                continue
            if purged:
                logger.info("%s: purged %d expired entities", type(self).__name__, purged)
