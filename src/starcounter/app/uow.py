"""
Unit of Work Pattern

Persists the entity after an action and publishes the collected command
records once the save succeeded.
"""

from typing import List, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.entity import Entity
    from .bus import EventBus


class UnitOfWork:
    """
    Manages persistence and domain events.

    Events are published only after a successful commit; a failed commit
    clears them instead.
    """

    def __init__(self, bus: 'EventBus'):
        self.bus = bus
        self._events: List[Dict[str, Any]] = []

    def collect_event(self, event_data: Dict[str, Any]) -> None:
        """Collect a domain event to be published after commit."""
        self._events.append(event_data)

    async def commit(self, entity: 'Entity', command_record: Dict[str, Any]) -> None:
        """
        Commit entity state and publish collected domain events.

        Args:
            entity: Entity to persist
            command_record: Command record from dispatcher
        """
        self.collect_event(command_record)
        try:
            if entity.auto_persist:
                entity.save()
        except Exception:
            self.rollback()
            raise
        await self._publish_events()

    async def _publish_events(self) -> None:
        """Publish all collected domain events to the event bus."""
        events, self._events = self._events, []
        for event in events:
            await self.bus.publish(event)

    def rollback(self) -> None:
        """Clear collected events that were not committed."""
        self._events.clear()

    @property
    def pending_events(self) -> int:
        return len(self._events)
