"""potato-schedule - Tick-indexed delayed task scheduling."""
from __future__ import annotations

from potato_schedule.scheduler import TaskScheduler
from potato_schedule.systems import make_scheduler_system
from potato_schedule.types import SchedulingError, Task, TickSource

__all__ = [
    "TaskScheduler",
    "make_scheduler_system",
    "SchedulingError",
    "Task",
    "TickSource",
]
