from typing import Any, ClassVar, Optional

from fastcore.xml import Script
from pydantic import BaseModel, ConfigDict
from starlette.requests import Request

from ..persistence import MemoryRepo, register_backend
from .signals import SignalDescriptor, EventMethodDescriptor
from .mixins import EntityMixin, PersistenceMixin

datastar_script = Script(src="https://cdn.jsdelivr.net/gh/starfederation/datastar@v1.0.0-beta.11/bundles/datastar.js", type="module")


class Entity(EntityMixin, PersistenceMixin, BaseModel):
    """Base class for all entity classes."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    entity_namespace: ClassVar[Optional[str]] = None
    use_namespace: ClassVar[bool] = True
    auto_persist: ClassVar[bool] = True
    persistence_backend_class: ClassVar[type] = MemoryRepo
    ttl: ClassVar[Optional[int]] = None

    id: str = ""

    def __init__(self, req: Request = None, **kwargs):
        super().__init__(**kwargs)
        if not self.id:
            self.id = self._get_id(req)

        if self.auto_persist:
            self.save()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        # `Counter.Scounter` -> "$Counter.counter"
        for name in cls.signal_names():
            setattr(cls, f"S{name}", SignalDescriptor(name))

        # `Counter.increment()` -> "@post('/counter/increment')"
        for klass in reversed(cls.__mro__):
            for attr_name, attr in list(vars(klass).items()):
                if isinstance(attr, EventMethodDescriptor):
                    attr = attr.original_method
                if callable(attr) and hasattr(attr, '_event_info'):
                    setattr(cls, attr_name, EventMethodDescriptor(attr_name, attr, cls))

        register_backend(cls.persistence_backend_class())

    @classmethod
    def session_ttl(cls) -> Optional[int]:
        """Seconds a saved entity stays alive; None keeps it for the process lifetime."""
        return cls.ttl

    @classmethod
    def events(cls) -> dict[str, EventMethodDescriptor]:
        """All @event methods of this entity class, by name."""
        return {name: attr for name, attr in vars(cls).items() if isinstance(attr, EventMethodDescriptor)}
