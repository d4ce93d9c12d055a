"""potato-tick - Logical clock and fixed-rate tick source."""

from potato_tick.clock import Clock
from potato_tick.engine import Engine
from potato_tick.types import System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "System",
]
