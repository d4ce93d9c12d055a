"""Server potato -- one activation, 100 ticks of effects, then a disconnect.

Demonstrates:
- Driving a TaskScheduler from an Engine tick source
- Activating an EffectEpisode seeded from the engine RNG
- Reporting through an on_stop hook
- A minimal EffectSink that logs instead of talking to real clients
- A session that quits half way through (pulses stop, termination still fires)

Run: python packages/potato-episode/examples/server_potato.py
"""

import logging
from collections import Counter
from dataclasses import dataclass, field

from potato_schedule import TaskScheduler
from potato_tick import Engine

from potato_episode import EffectEpisode, Modifier, Orientation, Vec3

log = logging.getLogger("server_potato")


# ---------------------------------------------------------------------------
# Sessions and host
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Player:
    name: str
    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 64.0, 0.0))
    yaw: float = 0.0
    pitch: float = 0.0
    connected: bool = True


class Lobby:
    def __init__(self, *players: Player) -> None:
        self.players = list(players)

    def sessions(self) -> list[Player]:
        return [p for p in self.players if p.connected]


# ---------------------------------------------------------------------------
# Sink
# ---------------------------------------------------------------------------

class LoggingSink:
    """Logs messages and modifiers, tallies the high-volume pulse effects."""

    def __init__(self) -> None:
        self.tally: Counter[str] = Counter()

    def deliver_message(self, session: Player, text: str, transient: bool) -> None:
        where = "action bar" if transient else "chat"
        log.info("[%s] %s: %s", where, session.name, text)

    def apply_modifier(self, session: Player, modifier: Modifier) -> None:
        log.info("%s gets %s for %d ticks", session.name, modifier.kind, modifier.duration)

    def emit_visual_burst(self, session: Player, category: str, count: int, origin: Vec3) -> None:
        self.tally[category] += count

    def emit_audio_cue(self, session: Player, category: str, pitch: float, volume: float) -> None:
        self.tally[f"sound:{category}"] += 1

    def update_orientation(self, session: Player, position: Vec3, yaw: float, pitch: float) -> None:
        self.tally["shake"] += 1

    def terminate_session(self, session: Player, reason: str) -> None:
        session.connected = False
        log.info("%s disconnected: %s", session.name, reason)

    def is_live(self, session: Player) -> bool:
        return session.connected

    def display_name(self, session: Player) -> str:
        return session.name

    def position(self, session: Player) -> Vec3:
        return session.position

    def orientation(self, session: Player) -> Orientation:
        return Orientation(session.yaw, session.pitch)


# ---------------------------------------------------------------------------
# Setup and run
# ---------------------------------------------------------------------------

def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    print("=== Server Potato ===\n")

    alice = Player("Alice", Vec3(12.5, 70.0, -3.0), yaw=45.0)
    bob = Player("Bob")
    lobby = Lobby(alice, bob)

    engine = Engine(tps=20, seed=42)
    scheduler = TaskScheduler(engine)
    sink = LoggingSink()
    # Seeded engine RNG: the same seed replays the same particles and pitches.
    episode = EffectEpisode(scheduler, sink, lambda session: lobby, rng=engine.random)

    def alice_rage_quits(ctx):
        if ctx.tick_number == 60:
            alice.connected = False
            log.info("Alice quit at tick %d", ctx.tick_number)

    def report(ctx):
        print(f"\nStopped after {ctx.elapsed:.2f}s of game time (seed {engine.seed})")
        print(f"Pulse effects delivered before the quit: {dict(sink.tally)}")
        print(f"Scheduler idle at tick {scheduler.now()}: {scheduler.pending()} pending tasks")

    engine.on_stop(report)
    episode.activate(alice)
    engine.add_system(alice_rage_quits)
    engine.run(120)


if __name__ == "__main__":
    main()
