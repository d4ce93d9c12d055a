"""Tests for clock advancement and TickContext generation."""

import random

import pytest
from potato_tick.clock import Clock
from potato_tick.types import TickContext

_test_rng = random.Random(0)


def test_clock_defaults_to_twenty_tps():
    clock = Clock()
    assert clock.tps == 20
    assert clock.tick_number == 0
    assert abs(clock.dt - 0.05) < 1e-9


def test_clock_rejects_non_positive_tps():
    with pytest.raises(ValueError):
        Clock(tps=0)
    with pytest.raises(ValueError):
        Clock(tps=-5)


def test_advance_returns_new_tick_number():
    """advance() increments by exactly one and returns the new value."""
    clock = Clock(tps=20)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.advance() == 3
    assert clock.tick_number == 3


def test_now_does_not_mutate():
    clock = Clock(tps=20)
    clock.advance()
    assert clock.now() == 1
    assert clock.now() == 1
    assert clock.tick_number == 1


def test_multiple_advances_monotonic():
    clock = Clock(tps=20)
    prev = clock.now()
    for _ in range(100):
        current = clock.advance()
        assert current == prev + 1
        prev = current


def test_context_returns_correct_values():
    clock = Clock(tps=20)
    clock.advance()

    stop_called = []

    def stop_fn():
        stop_called.append(True)

    rng = random.Random(0)
    ctx = clock.context(stop_fn, rng)

    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 1
    assert abs(ctx.dt - 0.05) < 1e-9
    assert abs(ctx.elapsed - 0.05) < 1e-9
    assert ctx.random is rng

    ctx.request_stop()
    assert stop_called == [True]


def test_context_elapsed_calculation():
    """elapsed is tick_number * dt."""
    clock = Clock(tps=20)
    for i in range(1, 11):
        clock.advance()
        ctx = clock.context(lambda: None, _test_rng)
        assert abs(ctx.elapsed - i * 0.05) < 1e-9


def test_context_before_first_advance():
    clock = Clock(tps=20)
    ctx = clock.context(lambda: None, _test_rng)

    assert ctx.tick_number == 0
    assert ctx.elapsed == 0.0


def test_context_is_frozen():
    clock = Clock(tps=20)
    ctx = clock.context(lambda: None, _test_rng)

    with pytest.raises(AttributeError):
        ctx.tick_number = 99  # type: ignore[misc]
