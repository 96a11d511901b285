"""
FastHTML Web Adapter

Provides a simple configure_app function to set up FastHTML with StarCounter.
Uses FastHTMLDispatcher internally for FastHTML-specific route registration.
"""

import logging
from typing import Callable, List, Optional, Type

from ..app.bus import log_command
from ..app.dispatcher import Dispatcher
from ..config import ApplicationConfig, get_config, set_config
from ..core.entity import Entity
from ..core.events import EventInfo
from ..persistence import configure_all_cleanup

logger = logging.getLogger(__name__)


class FastHTMLDispatcher(Dispatcher):
    """FastHTML-specific dispatcher that only overrides what's needed."""

    def _register_route(self, router, path: str, handler: Callable, event_info: EventInfo):
        """Register route using FastHTML's decorator pattern."""
        router(path, methods=[event_info.method])(handler)


def configure_app(app, rt, entity_classes: List[Type[Entity]] = None,
                  config: Optional[ApplicationConfig] = None) -> FastHTMLDispatcher:
    """
    Configure FastHTML app with StarCounter entities.

    ```python
    from starcounter.adapters.fasthtml import configure_app
    app, rt = fast_app()
    configure_app(app, rt, [Counter])
    ```

    Args:
        app: FastHTML app instance
        rt: FastHTML router instance
        entity_classes: Optional list of specific entities to register.
                        If None, registers all Entity subclasses.
        config: Application configuration; installed as the global config
                so entities pick up its counter and session settings

    Returns:
        The dispatcher serving the entity routes
    """
    if config is None:
        config = get_config()
    else:
        set_config(config)
    configure_all_cleanup(config.persistence.auto_cleanup, config.persistence.cleanup_interval)

    dispatcher = FastHTMLDispatcher()
    dispatcher.bus.subscribe(log_command)
    dispatcher.include_entities(rt, entity_classes)

    app.state.dispatcher = dispatcher
    logger.info("Registered %d event routes", len(dispatcher.namespace_routes))
    return dispatcher
