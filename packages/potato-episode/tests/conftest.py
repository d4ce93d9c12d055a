"""Shared fixtures: in-memory sessions, host registry and a recording sink."""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Callable

import pytest
from potato_schedule import TaskScheduler

from potato_episode import EffectEpisode, EpisodeConfig, Modifier, Orientation, Vec3


@dataclass(eq=False)
class Player:
    name: str
    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 64.0, 0.0))
    yaw: float = 0.0
    pitch: float = 0.0


class Host:
    def __init__(self, *players: Player) -> None:
        self.players = list(players)
        self.queries = 0

    def sessions(self) -> list[Player]:
        self.queries += 1
        return list(self.players)


@dataclass
class Call:
    tick: int
    op: str
    session: Any
    args: tuple


class RecordingSink:
    """Records every effect call together with the tick it happened at."""

    def __init__(self, now: Callable[[], int]) -> None:
        self.clock = now
        self.calls: list[Call] = []
        self.disconnect_at: dict[Player, int] = {}

    def _record(self, op: str, session: Any, *args: Any) -> None:
        self.calls.append(Call(self.clock(), op, session, args))

    def deliver_message(self, session, text, transient):
        self._record("message", session, text, transient)

    def apply_modifier(self, session, modifier: Modifier):
        self._record("modifier", session, modifier)

    def emit_visual_burst(self, session, category, count, origin):
        self._record("visual", session, category, count, origin)

    def emit_audio_cue(self, session, category, pitch, volume):
        self._record("audio", session, category, pitch, volume)

    def update_orientation(self, session, position, yaw, pitch):
        self._record("orientation", session, position, yaw, pitch)

    def terminate_session(self, session, reason):
        self._record("terminate", session, reason)

    def is_live(self, session) -> bool:
        cutoff = self.disconnect_at.get(session)
        return cutoff is None or self.clock() < cutoff

    def display_name(self, session) -> str:
        return session.name

    def position(self, session) -> Vec3:
        return session.position

    def orientation(self, session) -> Orientation:
        return Orientation(session.yaw, session.pitch)

    # --- Query helpers for assertions ---

    def of(self, session, op: str | None = None, tick: int | None = None) -> list[Call]:
        return [
            c
            for c in self.calls
            if c.session is session
            and (op is None or c.op == op)
            and (tick is None or c.tick == tick)
        ]

    def ticks(self, session, op: str) -> list[int]:
        return sorted({c.tick for c in self.of(session, op)})


@pytest.fixture
def scheduler() -> TaskScheduler:
    return TaskScheduler()


@pytest.fixture
def sink(scheduler: TaskScheduler) -> RecordingSink:
    return RecordingSink(scheduler.now)


@pytest.fixture
def make_sink():
    return RecordingSink


@pytest.fixture
def alice() -> Player:
    return Player("Alice", Vec3(10.0, 64.0, -5.0), yaw=90.0, pitch=-10.0)


@pytest.fixture
def bob() -> Player:
    return Player("Bob")


@pytest.fixture
def carol() -> Player:
    return Player("Carol")


@pytest.fixture
def dave() -> Player:
    return Player("Dave")


@pytest.fixture
def host(alice: Player, bob: Player, carol: Player) -> Host:
    return Host(alice, bob, carol)


@pytest.fixture
def make_episode(scheduler, sink, host):
    def factory(config: EpisodeConfig | None = None, resolve=None) -> EffectEpisode:
        return EffectEpisode(
            scheduler,
            sink,
            resolve if resolve is not None else (lambda session: host),
            config=config,
            rng=random.Random(1234),
        )

    return factory


def run_ticks(scheduler: TaskScheduler, n: int) -> None:
    for _ in range(n):
        scheduler.on_tick()


@pytest.fixture
def tick():
    return run_ticks
