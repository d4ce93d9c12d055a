"""Engine - the periodic tick source that drives registered systems."""

import logging
import os
import random
import time

from potato_tick.clock import Clock
from potato_tick.types import Hook, System

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, tps: int = 20, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        """The engine's seeded RNG, shared with every TickContext."""
        return self._rng

    @property
    def systems(self) -> tuple[System, ...]:
        return tuple(self._systems)

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[Hook]) -> None:
        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in hooks:
            hook(ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                logger.debug("stop requested at tick %d", self._clock.tick_number)
                break

        self._fire(self._stop_hooks)

    def run_forever(self) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)
        logger.info("engine running at %d tps", self._clock.tps)

        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        logger.info("engine stopped at tick %d", self._clock.tick_number)
        self._fire(self._stop_hooks)
