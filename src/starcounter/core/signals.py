import functools


class SignalDescriptor:
    """`Counter.Scounter` is the Datastar expression, `counter.Scounter` the value."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name

    def __get__(self, instance, owner):
        if instance is None:
            prefix = f"{owner.signal_namespace()}." if owner.use_namespace else ""
            return f"${prefix}{self.field_name}"
        return instance.signal_data()[self.field_name]


class EventMethodDescriptor:
    """
    Wraps an @event method.

    On the class it builds the Datastar action that triggers the event
    (`Counter.increment()` -> `@post('/counter/increment')`); on an instance
    it is the plain bound method.
    """

    def __init__(self, method_name: str, original_method, owner=None):
        self.method_name = method_name
        self.original_method = original_method
        self.event_info = original_method._event_info
        self.owner = owner

    def __get__(self, instance, owner):
        if instance is None:
            self.owner = owner
            return self
        return functools.partial(self.original_method, instance)

    @property
    def path(self) -> str:
        return self.event_info.path or f"/{self.owner.signal_namespace().lower()}/{self.method_name}"

    def __call__(self) -> str:
        return f"@{self.event_info.method.lower()}('{self.path}')"

    def __repr__(self) -> str:
        return f"<event {self.event_info.method} {self.path}>"
