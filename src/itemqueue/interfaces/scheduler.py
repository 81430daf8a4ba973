"""Interface for schedulers that run deferred units of work."""

import abc
from collections.abc import Callable
from typing import TypeAlias

from itemqueue.domain.errors import QueueError

# pylint: disable=too-few-public-methods

WorkUnit: TypeAlias = Callable[[], None]


class TaskScheduler(abc.ABC):
    """Contract for a scheduler of deferred work units.

    Guarantees every implementation must honor:
    - `submit()` never runs the unit synchronously on the caller's stack.
    - Every submitted unit eventually runs exactly once.
    - Units run in submission (FIFO) order, one at a time.

    There is no cancellation and no timeout; once submitted, a unit will run.
    """

    @abc.abstractmethod
    def submit(self, unit: WorkUnit) -> None:
        """Schedule `unit` to run later.

        Args:
            unit (WorkUnit): A zero-argument callable.

        Raises:
            SchedulerClosedError: If the scheduler no longer accepts work.
        """


class SchedulerClosedError(QueueError):
    """Raised when work is submitted to a scheduler that has been shut down.

    Attributes:
        scheduler (str): Name of the scheduler type that refused the work.
    """

    def __init__(self, scheduler: str) -> None:
        super().__init__(f"Scheduler '{scheduler}' is closed and accepts no work.")
        self.scheduler = scheduler
