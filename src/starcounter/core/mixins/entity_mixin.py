"""
EntityMixin: Core entity functionality without base model dependencies.

Provides namespacing, Datastar signals, session-scoped ids and rendering.
"""

import json
import uuid
from typing import Any, Dict

from fastcore.xml import Div
from starlette.requests import Request


class EntityMixin:
    """
    Core entity functionality mixin.

    Provides configuration lookups, signals, and utility methods without
    depending on any specific base model class.
    """

    @classmethod
    def signal_namespace(cls) -> str:
        return cls.entity_namespace or cls.__name__

    @property
    def namespace(self) -> str:
        """Get the namespace for this entity instance."""
        return self.signal_namespace()

    @classmethod
    def signal_names(cls) -> list[str]:
        """Names exposed as Datastar signals. Override when signals come from elsewhere."""
        return [*cls.model_fields, *cls.model_computed_fields]

    def signal_data(self) -> Dict[str, Any]:
        """Values published as signals."""
        return self.model_dump()

    @property
    def signals(self) -> Dict[str, Any]:
        """Get signals for this entity."""
        if self.use_namespace:
            return {self.namespace: self.signal_data()}
        return self.signal_data()

    @classmethod
    def get_session_id(cls, req: Request, **kwargs) -> str:
        """Generate a per-session entity id. Override in subclasses for custom logic."""
        session_id = 'default'
        if req is not None and "session" in req.scope:
            key = f"{cls.signal_namespace().lower()}_sid"
            session_id = req.session.get(key)
            if not session_id:
                session_id = uuid.uuid4().hex
                req.session[key] = session_id
        return f"{cls.__name__.lower()}_{session_id[:100]}"

    @classmethod
    def _get_id(cls, req: Request, **kwargs) -> str:
        """Entity id from the field default, falling back to the session."""
        default = cls.model_fields['id'].get_default(call_default_factory=True)
        if default:
            return default
        return cls.get_session_id(req, **kwargs)

    def __ft__(self):
        """Render the entity as a Datastar signals holder."""
        return Div({"data-signals": json.dumps(self.signals)}, id=self.namespace)
