"""
Command dispatch.

Turns every @event method of an entity class into a route handler. A handler
loads the session entity, runs the event, commits through the unit of work
and answers in the format the caller asked for: a Datastar SSE stream, JSON,
or the rendered fragment.
"""

import inspect
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Type

from datastar_py import SSE_HEADERS
from fastcore.xml import FT, to_xml
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, StreamingResponse

from ..core.entity import Entity
from ..core.events import EventInfo
from .bus import EventBus, InProcessBus
from .datastar import fragment_event, is_datastar_request, signals_event
from .uow import UnitOfWork

logger = logging.getLogger(__name__)

CommandRecord = Dict[str, Any]


class Dispatcher:
    """Framework-neutral dispatcher; adapters supply `_register_route`."""

    def __init__(self, uow: UnitOfWork = None, bus: EventBus = None):
        self.bus = bus or InProcessBus()
        self.uow = uow or UnitOfWork(self.bus)
        self.namespace_routes: Dict[str, str] = {}

    def _register_route(self, router, path: str, handler: Callable, event_info: EventInfo):
        raise NotImplementedError("Subclasses must implement _register_route")

    def discover_events(self, entity_class: Type[Entity]) -> Dict[str, EventInfo]:
        return {name: descriptor.event_info for name, descriptor in entity_class.events().items()}

    def include_entity(self, router, entity_class: Type[Entity], base_path: str = "") -> None:
        """Register one route per event of `entity_class`, optionally under `base_path`."""
        prefix = f"/{base_path.strip('/')}" if base_path.strip('/') else ""
        for name, descriptor in entity_class.events().items():
            path = prefix + descriptor.path
            self.namespace_routes[path] = entity_class.signal_namespace()
            self._register_route(router, path, self._create_route_handler(entity_class, name), descriptor.event_info)
            logger.debug("Registered %s %s -> %s.%s", descriptor.event_info.method, path, entity_class.__name__, name)

    def include_entities(self, router, entity_classes: list = None, base_path: str = ""):
        for entity_class in entity_classes or Entity.__subclasses__():
            self.include_entity(router, entity_class, base_path)

    def _create_route_handler(self, entity_class: Type[Entity], event_name: str) -> Callable:
        event_function = getattr(entity_class, event_name).original_method

        async def handler(request: Request):
            # responses are fully rendered before they are returned
            try:
                entity = entity_class.get(request)
                entity.persistence_backend.start_cleanup()
                record = await self.call_event(entity, event_function)
                await self.uow.commit(entity, record)
                return self.command_to_response(record, entity, request)
            except Exception:
                logger.exception("Error executing %s.%s", entity_class.__name__, event_name)
                return PlainTextResponse(f"Error executing {event_name}", status_code=500)

        handler.__name__ = f"{entity_class.signal_namespace().lower()}_{event_name}"
        return handler

    async def call_event(self, entity: Entity, event_function: Callable) -> CommandRecord:
        """Run the event on `entity` and describe what happened."""
        result = event_function(entity)
        if inspect.isawaitable(result):
            result = await result

        record = {
            "entity": f"{type(entity).__name__}:{entity.id}",
            "event": event_function.__name__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "result": result,
            "state": entity.signal_data(),
            "event_info": event_function._event_info,
        }
        logger.debug("Executed %s on %s", record["event"], record["entity"])
        return record

    def command_to_response(self, record: CommandRecord, entity: Entity, request: Optional[Request]) -> Any:
        if is_datastar_request(request):
            events = self.sse_events(record, entity)
            return StreamingResponse(_replay(events), media_type="text/event-stream", headers=SSE_HEADERS)

        if request is not None and "application/json" in request.headers.get("accept", ""):
            return JSONResponse({"success": True, "entity": entity.signal_data(), "command": record["event"]})

        fragment = self._render_fragment(record["result"])
        if fragment is None:
            return PlainTextResponse(f"Command {record['event']} executed successfully")
        return HTMLResponse(fragment)

    def sse_events(self, record: CommandRecord, entity: Entity) -> List[str]:
        """The signals of `entity` followed by the rendered result, as SSE events."""
        events = [signals_event(entity.signals)]
        fragment = self._render_fragment(record["result"])
        if fragment is not None:
            info = record["event_info"]
            events.append(fragment_event(fragment, info.selector, info.merge_mode))
        return events

    def _render_fragment(self, item: Any) -> Optional[str]:
        if isinstance(item, str):
            return item
        if isinstance(item, FT) or hasattr(item, "__ft__"):
            return to_xml(item)
        return None


async def _replay(events: List[str]):
    for event in events:
        yield event
