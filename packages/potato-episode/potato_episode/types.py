"""Value types and collaborator protocols for effect episodes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable, Iterable, Optional, Protocol

# Opaque participant handle owned by the host. Compared by identity only.
Session = Hashable


@dataclass(frozen=True, slots=True)
class Vec3:
    x: float
    y: float
    z: float

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)


@dataclass(frozen=True, slots=True)
class Orientation:
    """Yaw and pitch in degrees."""

    yaw: float
    pitch: float


@dataclass(frozen=True, slots=True)
class Modifier:
    """Timed status alteration applied to a session."""

    kind: str
    intensity: int
    duration: int  # ticks


class SessionRegistry(Protocol):
    """Live view of the sessions connected to one host."""

    def sessions(self) -> Iterable[Session]: ...


class EffectSink(Protocol):
    """Fire-and-forget delivery of effects to sessions.

    The query methods (``is_live``, ``display_name``, ``position``,
    ``orientation``) are read at the moment a task runs, never cached.
    """

    def deliver_message(self, session: Session, text: str, transient: bool) -> None: ...

    def apply_modifier(self, session: Session, modifier: Modifier) -> None: ...

    def emit_visual_burst(
        self, session: Session, category: str, count: int, origin: Vec3
    ) -> None: ...

    def emit_audio_cue(
        self, session: Session, category: str, pitch: float, volume: float
    ) -> None: ...

    def update_orientation(
        self, session: Session, position: Vec3, yaw: float, pitch: float
    ) -> None: ...

    def terminate_session(self, session: Session, reason: str) -> None: ...

    def is_live(self, session: Session) -> bool: ...

    def display_name(self, session: Session) -> str: ...

    def position(self, session: Session) -> Vec3: ...

    def orientation(self, session: Session) -> Orientation: ...


# Resolves the host context backing a session; None when it is unavailable.
HostResolver = Callable[[Session], Optional[SessionRegistry]]
