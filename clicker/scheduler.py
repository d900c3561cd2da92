"""
Periodic callback scheduling.

Games never call pygame timers or wall-clock time directly. They ask a
Scheduler for periodic callbacks and cancel them through the returned
handle, so the same game logic runs under the real frame loop and under
a fake clock in tests.

Usage:
    scheduler = FrameScheduler()
    handle = scheduler.schedule_periodic(1.0, on_tick)

    # In the game loop
    scheduler.advance(dt)

    # Later (safe to repeat)
    scheduler.cancel(handle)
"""
import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from clicker.logging import get_logger

log = get_logger('scheduler')

Callback = Callable[[], None]


@dataclass(eq=False)
class ScheduleHandle:
    """Opaque reference to a periodic schedule.

    Attributes:
        id: Unique id within the owning scheduler (creation order)
        interval: Seconds between firings
        next_fire: Scheduler time of the next firing
        cancelled: True once the schedule has been cancelled
    """
    id: int
    interval: float
    callback: Callback = field(repr=False)
    next_fire: float
    cancelled: bool = False


class Scheduler(ABC):
    """Abstract periodic scheduler."""

    @abstractmethod
    def schedule_periodic(self, interval: float, callback: Callback) -> ScheduleHandle:
        """Call callback every interval seconds until cancelled.

        The first call happens one full interval after scheduling.

        Raises:
            ValueError: If interval is not positive
        """
        pass

    @abstractmethod
    def cancel(self, handle: Optional[ScheduleHandle]) -> None:
        """Stop a schedule.

        Cancelling None, an already-cancelled handle or a handle from
        another scheduler does nothing.
        """
        pass


class FrameScheduler(Scheduler):
    """Scheduler driven by explicit time steps.

    The game loop calls advance(dt) once per frame with the frame delta.
    Tests call advance() with whatever step they need, which makes this
    class its own fake clock.

    Callbacks due within one advance() are fired in chronological order
    (ties in creation order), so a large step behaves the same as many
    small ones. Callbacks may cancel or create schedules while firing.
    """

    def __init__(self, start_time: float = 0.0):
        self._now = start_time
        self._ids = itertools.count()
        self._active: Dict[int, ScheduleHandle] = {}

    @property
    def now(self) -> float:
        """Current scheduler time in seconds."""
        return self._now

    @property
    def active_count(self) -> int:
        """Number of live (uncancelled) schedules."""
        return len(self._active)

    def is_active(self, handle: Optional[ScheduleHandle]) -> bool:
        """Check whether handle refers to a live schedule of this scheduler."""
        return handle is not None and self._active.get(handle.id) is handle

    def schedule_periodic(self, interval: float, callback: Callback) -> ScheduleHandle:
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")

        handle = ScheduleHandle(
            id=next(self._ids),
            interval=interval,
            callback=callback,
            next_fire=self._now + interval,
        )
        self._active[handle.id] = handle
        log.trace("Scheduled #%d every %.3fs", handle.id, interval)
        return handle

    def cancel(self, handle: Optional[ScheduleHandle]) -> None:
        if not self.is_active(handle):
            return
        handle.cancelled = True
        del self._active[handle.id]
        log.trace("Cancelled #%d", handle.id)

    def advance(self, dt: float) -> int:
        """Move time forward by dt seconds, firing every due callback.

        Args:
            dt: Seconds to advance (negative values are treated as 0)

        Returns:
            Number of callbacks fired
        """
        target = self._now + max(0.0, dt)
        fired = 0

        while True:
            due = self._next_due(target)
            if due is None:
                break
            self._now = due.next_fire
            due.next_fire += due.interval
            due.callback()
            fired += 1

        self._now = target
        return fired

    def _next_due(self, limit: float) -> Optional[ScheduleHandle]:
        """Earliest live schedule firing at or before limit."""
        best = None
        for handle in self._active.values():
            if handle.next_fire > limit:
                continue
            if best is None or (handle.next_fire, handle.id) < (best.next_fire, best.id):
                best = handle
        return best
