"""
Counter Entity

Session-scoped counter screen state. Wraps one CounterStore and exposes its
actions as events; turning increment()'s refusal into a notification happens
here, never inside the store.
"""

from typing import Any, Dict, Optional

from fastcore.xml import Div
from pydantic import Field, PrivateAttr

from .config import get_config
from .core import CounterState, CounterStore, Entity, event

NOTIFICATION_ID = "notification"
NOTIFICATION_TIMEOUT_MS = 4000


def _default_max_count() -> int:
    return get_config().counter.max_count


def Notification(message: str = ""):
    """The single notification slot; an empty message dismisses it, a message hides itself after a few seconds."""
    if not message:
        return Div(id=NOTIFICATION_ID)
    hide = f"setTimeout(() => {{ el.textContent = ''; el.className = '' }}, {NOTIFICATION_TIMEOUT_MS})"
    return Div(message, id=NOTIFICATION_ID, role="status", data_on_load=hide,
               cls="fixed bottom-6 left-1/2 -translate-x-1/2 rounded bg-neutral-800 px-4 py-3 text-sm text-white shadow")


def limit_reached_message(max_count: int) -> str:
    return f"Maximum count reached ({max_count})"


class Counter(Entity):
    """Bounded counter with increment, decrement and reset."""

    max_count: int = Field(default_factory=_default_max_count, frozen=True)
    _store: CounterStore = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._store = CounterStore(max_count=self.max_count)

    @classmethod
    def session_ttl(cls) -> Optional[int]:
        if cls.ttl is not None:
            return cls.ttl
        return get_config().persistence.session_ttl

    @classmethod
    def signal_names(cls) -> list[str]:
        return [*CounterState.model_fields, *CounterState.model_computed_fields]

    def signal_data(self) -> Dict[str, Any]:
        return self.read().model_dump()

    def read(self) -> CounterState:
        return self._store.read()

    @event(method="POST")
    def decrement(self):
        self._store.decrement()
        return Notification()

    @event(method="POST")
    def increment(self):
        if not self._store.increment():
            return Notification(limit_reached_message(self.read().max_count))
        return Notification()

    @event(method="POST")
    def reset(self):
        self._store.reset()
        return Notification()
