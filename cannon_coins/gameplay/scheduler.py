"""
Cooperative timer scheduler for the simulation.
NO UI DEPENDENCIES.

Every recurring action in the game (bullet and ball movement, spawning,
difficulty) is a task on one Scheduler. Nothing runs on its own: the frame
loop, or a test, calls advance() with the elapsed milliseconds and every task
that came due in that window runs to completion, in due-time order.
"""
import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class TaskHandle:
    """
    Handle to a scheduled task.

    Cancelling a handle is idempotent. A one-shot task is marked
    cancelled once it has fired.
    """

    def __init__(self, callback: Callable[[], None], period_ms: Optional[float], name: str = ""):
        self.callback = callback
        self.period_ms = period_ms
        self.name = name
        self.cancelled = False

    @property
    def active(self) -> bool:
        return not self.cancelled

    @property
    def recurring(self) -> bool:
        return self.period_ms is not None

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "active"
        return f"TaskHandle({self.name or self.callback!r}, period={self.period_ms}, {state})"


@dataclass(order=True)
class _Entry:
    due: float
    seq: int
    task: TaskHandle = field(compare=False)


class Scheduler:
    """
    Single-threaded scheduler with cancellable one-shot and recurring tasks.

    Usage:
        scheduler = Scheduler()
        handle = scheduler.every(20, move_bullet)
        scheduler.advance(100)   # move_bullet runs 5 times
        scheduler.cancel(handle)
    """

    def __init__(self):
        self._now_ms = 0.0
        self._queue: List[_Entry] = []
        self._seq = itertools.count()
        self._tasks_run = 0

    @property
    def now_ms(self) -> float:
        """Scheduler clock in milliseconds."""
        return self._now_ms

    @property
    def tasks_run(self) -> int:
        """Total number of callbacks executed."""
        return self._tasks_run

    @property
    def pending(self) -> int:
        """Number of distinct active tasks still queued."""
        return len({id(e.task) for e in self._queue if e.task.active})

    # =========================================================================
    # SCHEDULING
    # =========================================================================

    def every(self, period_ms: float, callback: Callable[[], None], name: str = "") -> TaskHandle:
        """Run callback every period_ms, first run one period from now."""
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        task = TaskHandle(callback, period_ms, name)
        self._push(self._now_ms + period_ms, task)
        return task

    def after(self, delay_ms: float, callback: Callable[[], None], name: str = "") -> TaskHandle:
        """Run callback once, delay_ms from now."""
        if delay_ms < 0:
            raise ValueError(f"delay_ms must not be negative, got {delay_ms}")
        task = TaskHandle(callback, None, name)
        self._push(self._now_ms + delay_ms, task)
        return task

    def cancel(self, task: Optional[TaskHandle]) -> None:
        """Cancel a task. None and already-cancelled handles are ignored."""
        if task is not None:
            task.cancelled = True

    def cancel_all(self) -> None:
        """Cancel every queued task and drop the queue."""
        for entry in self._queue:
            entry.task.cancelled = True
        logger.debug(f"Cancelled all tasks at {self._now_ms:.0f}ms ({len(self._queue)} queued)")
        self._queue.clear()

    # =========================================================================
    # CLOCK
    # =========================================================================

    def advance(self, elapsed_ms: float) -> int:
        """
        Move the clock forward by elapsed_ms, running every task that
        comes due. Tasks scheduled by callbacks run too if they fall inside
        the window. Returns the number of callbacks executed.

        Callback errors propagate; the scheduler stays consistent.
        """
        if elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must not be negative, got {elapsed_ms}")

        target = self._now_ms + elapsed_ms
        ran = 0

        while self._queue and self._queue[0].due <= target:
            entry = heapq.heappop(self._queue)
            task = entry.task
            if task.cancelled:
                continue

            self._now_ms = entry.due

            # Re-arm first so the callback may cancel its own task
            if task.recurring:
                self._push(entry.due + task.period_ms, task)
            else:
                task.cancelled = True

            ran += 1
            self._tasks_run += 1
            task.callback()

        self._now_ms = target
        return ran

    def _push(self, due: float, task: TaskHandle) -> None:
        heapq.heappush(self._queue, _Entry(due, next(self._seq), task))
