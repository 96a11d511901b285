"""
Event Bus

Publishes command records after each committed entity action, so observers
can react without the entity or store knowing about them.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Awaitable, List, Dict, Any

logger = logging.getLogger(__name__)


class EventBus(ABC):
    """Abstract base class for event buses."""

    @abstractmethod
    async def publish(self, event: Dict[str, Any]) -> None:
        """Publish an event to all subscribers."""

    @abstractmethod
    def subscribe(self, handler: Callable[[Dict[str, Any]], Awaitable[None]]) -> Callable[[], None]:
        """Subscribe a handler to receive events; returns an unsubscribe callable."""


class InProcessBus(EventBus):
    """
    Simple in-process event bus for single-instance applications.

    A failing subscriber is logged and does not stop delivery to the others.
    """

    def __init__(self):
        self._subscribers: List[Callable[[Dict[str, Any]], Awaitable[None]]] = []

    def subscribe(self, handler: Callable[[Dict[str, Any]], Awaitable[None]]) -> Callable[[], None]:
        """
        Subscribe a handler to receive all events.

        Args:
            handler: Async function that accepts event data

        Returns:
            Callable that removes the handler again
        """
        self._subscribers.append(handler)

        def unsubscribe() -> None:
            if handler in self._subscribers:
                self._subscribers.remove(handler)

        return unsubscribe

    async def publish(self, event: Dict[str, Any]) -> None:
        for handler in list(self._subscribers):
            try:
                await handler(event)
            except Exception:
                logger.exception("Event handler %r failed for %s", handler, event.get("event"))

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


async def log_command(event: Dict[str, Any]) -> None:
    """Bus subscriber that logs every committed action with the resulting state."""
    state = event.get("state") or {}
    logger.info("%s %s -> counter=%s", event.get("entity"), event.get("event"), state.get("counter"))
