"""
Counter Store

Owns exactly one CounterState and provides the only sanctioned mutation paths.
Every mutation swaps in a new frozen snapshot; snapshots already handed out by
read() never change. The store has no UI side effects: callers decide what to
do with increment()'s refusal.
"""

from .state import CounterState, DEFAULT_MAX_COUNT


class CounterStore:
    """Holds the counter snapshot and enforces the [0, max_count] bounds."""

    def __init__(self, max_count: int = DEFAULT_MAX_COUNT, counter: int = 0):
        self._state = CounterState(counter=counter, max_count=max_count)

    def read(self) -> CounterState:
        """Return the current snapshot."""
        return self._state

    def decrement(self) -> None:
        """Step down by one; silent no-op at the floor."""
        state = self._state
        if state.can_decrement:
            self._state = state.model_copy(update={"counter": state.counter - 1})

    def increment(self) -> bool:
        """
        Step up by one.

        Returns:
            True if the counter moved, False if the maximum was already reached
        """
        state = self._state
        if state.is_max_reached:
            return False
        self._state = state.model_copy(update={"counter": state.counter + 1})
        return True

    def reset(self) -> None:
        """Return to zero, keeping max_count."""
        self._state = self._state.model_copy(update={"counter": 0})

    def __repr__(self) -> str:
        state = self._state
        return f"CounterStore(counter={state.counter}, max_count={state.max_count})"
