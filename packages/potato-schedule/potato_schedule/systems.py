"""System factory that connects a TaskScheduler to a tick source."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from potato_tick import TickContext

    from potato_schedule.scheduler import TaskScheduler


def make_scheduler_system(
    scheduler: TaskScheduler,
) -> Callable[[TickContext], None]:
    """Return a system that dispatches the scheduler once per engine tick."""

    def scheduler_system(ctx: TickContext) -> None:
        scheduler.on_tick()

    return scheduler_system
