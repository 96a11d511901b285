"""
Counter Store Transition Tests

Bounds, idempotence at the floor and ceiling, reset behaviour and derived-flag
consistency for every operation, plus the reference scenarios.
"""

import random

import pytest
from pydantic import ValidationError

from starcounter import CounterStore, DEFAULT_MAX_COUNT


def assert_consistent(store: CounterStore):
    state = store.read()
    assert 0 <= state.counter <= state.max_count
    assert state.can_decrement == (state.counter > 0)
    assert state.can_reset == (state.counter != 0)
    assert state.is_max_reached == (state.counter >= state.max_count)


def test_fresh_store_starts_at_zero():
    store = CounterStore()
    state = store.read()
    assert state.counter == 0
    assert state.max_count == DEFAULT_MAX_COUNT == 10
    assert not state.can_decrement
    assert not state.can_reset
    assert not state.is_max_reached


@pytest.mark.parametrize("seed", range(20))
def test_bounds_hold_for_random_operation_sequences(seed):
    """0 <= counter <= max_count after every operation, flags always in sync."""
    rng = random.Random(seed)
    store = CounterStore(max_count=rng.randint(0, 12))
    operations = [store.increment, store.decrement, store.reset]

    for _ in range(200):
        before = store.read().counter
        operation = rng.choice(operations)
        result = operation()
        assert_consistent(store)
        if operation == store.increment:
            assert result == (before < store.read().max_count)
        else:
            assert result is None


def test_decrement_is_noop_at_floor():
    store = CounterStore()
    store.decrement()
    store.decrement()
    assert store.read().counter == 0
    assert_consistent(store)


def test_increment_below_ceiling_adds_exactly_one():
    store = CounterStore(max_count=10, counter=3)
    assert store.increment() is True
    assert store.read().counter == 4


def test_increment_is_refused_at_ceiling():
    store = CounterStore(max_count=3, counter=3)
    snapshot = store.read()

    assert store.increment() is False
    assert store.increment() is False
    assert store.read().counter == 3
    assert store.read() is snapshot


@pytest.mark.parametrize("start", [0, 1, 5, 10])
def test_reset_always_yields_zero_and_is_idempotent(start):
    store = CounterStore(counter=start)
    store.reset()
    assert store.read().counter == 0
    store.reset()
    assert store.read().counter == 0
    assert store.read().max_count == 10
    assert_consistent(store)


def test_snapshots_never_change_after_read():
    store = CounterStore()
    first = store.read()
    store.increment()
    second = store.read()
    store.reset()

    assert first.counter == 0
    assert second.counter == 1
    assert first is not second


def test_zero_max_count_never_increments():
    store = CounterStore(max_count=0)
    assert store.read().is_max_reached
    assert store.increment() is False
    assert store.read().counter == 0


@pytest.mark.parametrize("max_count, counter", [(10, -1), (10, 11), (-1, 0)])
def test_out_of_bounds_initial_state_is_rejected(max_count, counter):
    with pytest.raises(ValidationError):
        CounterStore(max_count=max_count, counter=counter)


def test_scenario_a_ten_increments_then_refusal():
    store = CounterStore(max_count=10)
    results = [store.increment() for _ in range(10)]
    assert results == [True] * 10
    assert store.read().counter == 10
    assert store.read().is_max_reached

    assert store.increment() is False
    assert store.read().counter == 10
    print("✓ Scenario A")


def test_scenario_b_decrement_down_to_floor():
    store = CounterStore(counter=5)
    for _ in range(5):
        store.decrement()
    assert store.read().counter == 0

    store.decrement()
    assert store.read().counter == 0
    print("✓ Scenario B")


def test_scenario_c_reset_clears_flags():
    store = CounterStore(counter=7)
    store.reset()
    state = store.read()
    assert state.counter == 0
    assert state.can_reset is False
    assert state.can_decrement is False
    print("✓ Scenario C")


def test_scenario_d_increment_then_reset():
    store = CounterStore()
    assert store.increment() is True
    assert store.read().counter == 1
    store.reset()
    assert store.read().counter == 0
    print("✓ Scenario D")
