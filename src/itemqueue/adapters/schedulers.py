"""Task schedulers for ITEMQUEUE.

Exports
-------
- SerialThreadScheduler: runs units on one background worker thread.
- ManualScheduler: queues units until the owner runs them (tests, demos).
- AsyncioScheduler: hands units to an asyncio event loop.

Each honors the `TaskScheduler` contract. A unit never runs on the caller's
stack inside `submit()`. Units run exactly once, one at a time, in
submission order.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections import deque
from concurrent.futures import ThreadPoolExecutor

from itemqueue.interfaces.scheduler import (
    SchedulerClosedError,
    TaskScheduler,
    WorkUnit,
)

__all__ = ["AsyncioScheduler", "ManualScheduler", "SerialThreadScheduler"]

logger = logging.getLogger(__name__)


class SerialThreadScheduler(TaskScheduler):
    """Thread-backed scheduler with a single worker.

    A single-worker `ThreadPoolExecutor` gives FIFO execution with no two
    units running at once. `wait_idle()` lets a caller block until every
    unit submitted so far has finished.

    A unit that raises is logged with its traceback; the worker carries on
    with the next unit.

    Args:
        thread_name_prefix: Prefix for the worker thread's name.
    """

    def __init__(self, thread_name_prefix: str = "itemqueue") -> None:
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix=thread_name_prefix
        )
        self._idle = threading.Condition()
        self._outstanding = 0
        self._closed = False

    def submit(self, unit: WorkUnit) -> None:
        with self._idle:
            if self._closed:
                raise SchedulerClosedError(type(self).__name__)
            self._outstanding += 1
            self._executor.submit(self._run, unit)

    def _run(self, unit: WorkUnit) -> None:
        try:
            unit()
        except Exception:  # pylint: disable=broad-except
            logger.exception("Unhandled exception in work unit %r", unit)
        finally:
            with self._idle:
                self._outstanding -= 1
                self._idle.notify_all()

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until all submitted units have finished.

        Args:
            timeout: Maximum number of seconds to wait, or None to wait forever.

        Returns:
            bool: True if the scheduler went idle, False on timeout.
        """
        with self._idle:
            return self._idle.wait_for(lambda: self._outstanding == 0, timeout)

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work and release the worker thread.

        Units already submitted still run.

        Args:
            wait: If True, block until the queued units have finished.
        """
        with self._idle:
            self._closed = True
        logger.debug("Shutting down %s (wait=%s)", type(self).__name__, wait)
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> SerialThreadScheduler:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.shutdown(wait=True)


class ManualScheduler(TaskScheduler):
    """Deterministic scheduler driven by its owner.

    Units are queued by `submit()` and only run when `run_pending()` is
    called. Exceptions raised by a unit propagate out of `run_pending()`
    and the remaining units stay queued.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self) -> None:
        self._units: deque[WorkUnit] = deque()

    def submit(self, unit: WorkUnit) -> None:
        self._units.append(unit)

    @property
    def pending_units(self) -> int:
        """Number of units waiting to run."""
        return len(self._units)

    def run_pending(self) -> int:
        """Run the units queued at the time of the call, oldest first.

        Units submitted while this call runs are kept for the next call.

        Returns:
            int: The number of units that ran.
        """
        ran = 0
        for _ in range(len(self._units)):
            unit = self._units.popleft()
            unit()
            ran += 1
        return ran


class AsyncioScheduler(TaskScheduler):
    """Scheduler that runs units as callbacks on an asyncio event loop.

    `loop.call_soon_threadsafe` runs callbacks in the order they were
    scheduled, so FIFO order holds. Exceptions raised by a unit are reported
    through the loop's exception handler.

    Args:
        loop: The event loop that will run the units.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    def submit(self, unit: WorkUnit) -> None:
        try:
            self._loop.call_soon_threadsafe(unit)
        except RuntimeError as e:  # raised by a closed loop
            raise SchedulerClosedError(type(self).__name__) from e
