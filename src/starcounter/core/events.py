"""
Entity events.

`@event` marks an entity method as an HTTP action. Nothing is routed here:
the dispatcher reads the attached EventInfo when an app is configured.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EventInfo:
    name: str
    method: str = "POST"
    selector: Optional[str] = None
    merge_mode: str = "morph"
    path: Optional[str] = None


def event(fn=None, *, method: str = "POST", selector: Optional[str] = None,
          merge_mode: str = "morph", path: Optional[str] = None):
    """
    Mark an entity method as an event.

    Usable bare (`@event`) or with options (`@event(method="POST")`).

    Args:
        method: HTTP method the route answers to
        selector: CSS selector the returned fragment is merged into;
            by default Datastar matches on the fragment's id
        merge_mode: Datastar merge mode for the fragment
        path: route path, defaults to /<namespace>/<method name>
    """
    def mark(func):
        func._event_info = EventInfo(func.__name__, method.upper(), selector, merge_mode, path)
        return func

    return mark(fn) if fn is not None else mark
