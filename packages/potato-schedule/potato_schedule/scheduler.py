"""TaskScheduler - runs zero-argument tasks a number of ticks in the future."""
from __future__ import annotations

import logging

from potato_tick import Clock

from potato_schedule.systems import make_scheduler_system
from potato_schedule.types import SchedulingError, Task, TickSource

logger = logging.getLogger(__name__)


class TaskScheduler:
    """Maps absolute ticks to insertion-ordered buckets of pending tasks.

    Each ``on_tick()`` advances the clock by one, pops the bucket for the new
    tick and runs it. A bucket is popped before its tasks run, so a task that
    calls ``schedule(0, ...)`` during dispatch targets a bucket that has
    already been read: that task is never run. The same holds for
    ``schedule(0, ...)`` between ticks. Such stale buckets are discarded (with
    a warning) at the start of the next ``on_tick()``.

    ``drain_same_tick=True`` instead drains same-tick tasks scheduled during
    dispatch right after the primary bucket, in the same ``on_tick()``.

    By default a failing task propagates out of ``on_tick()`` and the rest of
    its bucket is lost. ``isolate_failures=True`` logs the failure and keeps
    running the remaining tasks.

    Not thread-safe: ``schedule`` and ``on_tick`` must run on one thread.
    """

    def __init__(
        self,
        source: TickSource | None = None,
        clock: Clock | None = None,
        *,
        isolate_failures: bool = False,
        drain_same_tick: bool = False,
    ) -> None:
        # The source already advances its own clock once per tick.
        if clock is not None and getattr(source, "clock", None) is clock:
            raise ValueError("scheduler clock must not be the tick source's clock")
        self._source = source
        self._clock = clock if clock is not None else Clock()
        self._buckets: dict[int, list[Task]] = {}
        self._started = False
        self._isolate_failures = isolate_failures
        self._drain_same_tick = drain_same_tick

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def started(self) -> bool:
        return self._started

    def now(self) -> int:
        return self._clock.now()

    # --- Registration ---

    def start(self) -> None:
        """Connect to the tick source. Safe to call any number of times."""
        if self._started:
            return
        self._started = True
        if self._source is None:
            return
        self._source.add_system(make_scheduler_system(self))
        logger.debug("scheduler registered with %r", self._source)

    # --- Scheduling ---

    def schedule(self, delay_ticks: int, task: Task) -> int:
        """Queue ``task`` to run ``delay_ticks`` ticks from now.

        Returns the absolute tick the task is due at.
        """
        if isinstance(delay_ticks, bool) or not isinstance(delay_ticks, int):
            raise SchedulingError(
                delay_ticks, f"delay_ticks must be an int, got {delay_ticks!r}"
            )
        if delay_ticks < 0:
            raise SchedulingError(
                delay_ticks, f"delay_ticks must be >= 0, got {delay_ticks}"
            )
        self.start()
        due = self._clock.now() + delay_ticks
        self._buckets.setdefault(due, []).append(task)
        return due

    # --- Dispatch (called once per tick signal) ---

    def on_tick(self) -> int:
        """Advance one tick and run every task due at it. Returns the count run."""
        stale = self._buckets.pop(self._clock.now(), None)
        if stale:
            logger.warning(
                "dropped %d task(s) scheduled for already-dispatched tick %d",
                len(stale),
                self._clock.now(),
            )

        tick = self._clock.advance()
        ran = 0
        bucket = self._buckets.pop(tick, None)
        while bucket is not None:
            ran += self._run(tick, bucket)
            if not self._drain_same_tick:
                break
            bucket = self._buckets.pop(tick, None)
        return ran

    def _run(self, tick: int, bucket: list[Task]) -> int:
        for task in bucket:
            if not self._isolate_failures:
                task()
                continue
            try:
                task()
            except Exception:
                logger.exception("task %r failed at tick %d", task, tick)
        return len(bucket)

    # --- Queries ---

    def pending(self) -> int:
        """Total number of tasks waiting in live buckets."""
        return sum(len(bucket) for bucket in self._buckets.values())

    def bucket_count(self) -> int:
        return len(self._buckets)

    def due_ticks(self) -> list[int]:
        return sorted(self._buckets)
