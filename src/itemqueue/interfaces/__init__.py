"""Interfaces (application boundary) for ITEMQUEUE.

Defines framework-free contracts (ABCs and type aliases) shared by the
service layer and adapters.

Dependency rule: may import `itemqueue.domain` only. It may be imported by
`itemqueue.service_layer`, `itemqueue.adapters`, and `itemqueue.bootstrap`.
"""

from .scheduler import SchedulerClosedError, TaskScheduler, WorkUnit

__all__ = ["SchedulerClosedError", "TaskScheduler", "WorkUnit"]
