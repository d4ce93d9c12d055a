"""potato-episode - Timed effect episodes on top of the task scheduler."""
from potato_episode.config import BurstSpec, EpisodeConfig
from potato_episode.effects import burst_origins, draw_pitch, jitter, shake_offsets
from potato_episode.episode import EffectEpisode
from potato_episode.types import (
    EffectSink,
    HostResolver,
    Modifier,
    Orientation,
    Session,
    SessionRegistry,
    Vec3,
)

__all__ = [
    "EffectEpisode",
    "EpisodeConfig",
    "BurstSpec",
    "EffectSink",
    "SessionRegistry",
    "HostResolver",
    "Session",
    "Modifier",
    "Orientation",
    "Vec3",
    "jitter",
    "burst_origins",
    "draw_pitch",
    "shake_offsets",
]
