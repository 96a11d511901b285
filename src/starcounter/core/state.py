"""
Counter State

Immutable snapshot of the counter. Only two integers are stored; the
control-enablement flags are computed from them on access.
"""

from pydantic import BaseModel, ConfigDict, computed_field, model_validator

DEFAULT_MAX_COUNT = 10


class CounterState(BaseModel):
    """Single source of truth for the displayed value and control flags."""
    model_config = ConfigDict(frozen=True)

    counter: int = 0
    max_count: int = DEFAULT_MAX_COUNT

    @model_validator(mode="after")
    def _check_bounds(self) -> "CounterState":
        if self.max_count < 0:
            raise ValueError(f"max_count must be >= 0, got {self.max_count}")
        if not 0 <= self.counter <= self.max_count:
            raise ValueError(f"counter must be within [0, {self.max_count}], got {self.counter}")
        return self

    @computed_field
    @property
    def can_decrement(self) -> bool:
        return self.counter > 0

    @computed_field
    @property
    def can_reset(self) -> bool:
        return self.counter != 0

    @computed_field
    @property
    def is_max_reached(self) -> bool:
        return self.counter >= self.max_count
