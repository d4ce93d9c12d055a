"""Per-pulse effect math: particle jitter, pitch draw, orientation shake."""
from __future__ import annotations

import math
import random

from potato_episode.types import Orientation, Vec3


def jitter(rng: random.Random, spread_xz: float, spread_y: float) -> Vec3:
    """Random offset: X and Z in [-spread_xz, spread_xz], Y in [0, spread_y]."""
    return Vec3(
        (rng.random() - 0.5) * 2 * spread_xz,
        rng.random() * spread_y,
        (rng.random() - 0.5) * 2 * spread_xz,
    )


def burst_origins(
    rng: random.Random,
    position: Vec3,
    count: int,
    spread_xz: float,
    spread_y: float,
) -> list[Vec3]:
    """One independently jittered origin per unit, around *position*."""
    return [position + jitter(rng, spread_xz, spread_y) for _ in range(count)]


def draw_pitch(rng: random.Random, low: float, span: float) -> float:
    """Uniform pitch in ``[low, low + span)``."""
    return low + rng.random() * span


def shake_offsets(tick: int, amplitude: float, frequency: float) -> Orientation:
    """Orientation offset at *tick*: yaw follows cos, pitch follows sin.

    >>> shake_offsets(0, 8.0, 0.4)
    Orientation(yaw=8.0, pitch=0.0)
    """
    phase = tick * frequency
    return Orientation(
        yaw=math.cos(phase) * amplitude,
        pitch=math.sin(phase) * amplitude,
    )
