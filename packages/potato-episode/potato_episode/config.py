"""Episode definitions: timing, effect volumes and message texts."""
from __future__ import annotations

from dataclasses import dataclass

from potato_episode.types import Modifier


@dataclass(frozen=True)
class BurstSpec:
    """One visual burst: ``count`` units of ``category`` per pulse."""

    category: str
    count: int


@dataclass(frozen=True)
class EpisodeConfig:
    """Everything an episode needs besides its collaborators. Not serialized.

    Delays are relative to the activation tick. Pulse ``i`` fires at
    ``pulse_delay + i``; termination fires at ``termination_delay``, which by
    default lands on the same tick as the last pulse.
    """

    # Messages
    self_transient: str = "You ate the server!"
    self_persistent: str = "The server has crashed..."
    broadcast_consumed: str = "Player {name} ate the server!"
    broadcast_crashed: str = "The server has crashed!"
    broadcast_recovered: str = "The server is back to normal."
    disconnect_reason: str = "You ate the server! Connection closed."

    # Modifiers
    self_modifiers: tuple[Modifier, ...] = (
        Modifier("toxicity", 0, 160),
        Modifier("visual-impairment", 0, 200),
    )
    other_modifiers: tuple[Modifier, ...] = (Modifier("visual-impairment", 0, 100),)

    # Timing (ticks)
    pulse_delay: int = 1
    pulse_count: int = 100
    termination_delay: int = 100

    # Visual bursts
    bursts: tuple[BurstSpec, ...] = (
        BurstSpec("explosion", 60),
        BurstSpec("flame", 80),
        BurstSpec("smoke", 40),
    )
    jitter_xz: float = 2.0  # +/- blocks around the session on X and Z
    jitter_y: float = 3.0  # 0..jitter_y above the session

    # Audio
    audio_cues: tuple[str, ...] = ("explosion", "thunder")
    pitch_min: float = 0.6
    pitch_span: float = 0.4
    volume: float = 2.0

    # Orientation shake
    shake_amplitude: float = 8.0  # degrees
    shake_frequency: float = 0.4  # radians per tick

    def __post_init__(self) -> None:
        for name in ("pulse_delay", "pulse_count", "termination_delay"):
            _require_int(name, getattr(self, name))
        for burst in self.bursts:
            _require_int(f"burst {burst.category!r} count", burst.count)

        # A zero delay would target the already-dispatched activation tick.
        if self.pulse_delay < 1:
            raise ValueError(f"pulse_delay must be >= 1, got {self.pulse_delay}")
        if self.termination_delay < 1:
            raise ValueError(
                f"termination_delay must be >= 1, got {self.termination_delay}"
            )
        if self.pulse_count < 0:
            raise ValueError(f"pulse_count must be >= 0, got {self.pulse_count}")
        for burst in self.bursts:
            if burst.count < 0:
                raise ValueError(
                    f"burst {burst.category!r} count must be >= 0, got {burst.count}"
                )
        if self.pitch_span < 0:
            raise ValueError(f"pitch_span must be >= 0, got {self.pitch_span}")


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {value!r}")
