"""Shared types for tick-indexed task scheduling."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from potato_tick import TickContext

Task = Callable[[], None]


class TickSource(Protocol):
    """Anything that calls registered systems once per tick (e.g. ``Engine``)."""

    def add_system(self, system: Callable[[TickContext], None]) -> None: ...


class SchedulingError(ValueError):
    """Raised when a task is scheduled with an invalid delay."""

    def __init__(self, delay: object, message: str) -> None:
        self.delay = delay
        super().__init__(message)
