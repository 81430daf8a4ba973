"""Fixtures for TaskScheduler contract tests."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass

import pytest

from itemqueue.adapters.schedulers import (
    AsyncioScheduler,
    ManualScheduler,
    SerialThreadScheduler,
)
from itemqueue.interfaces.scheduler import TaskScheduler

RUN_TIMEOUT = 5.0


@dataclass
class SchedulerUnderTest:
    """A scheduler plus the means to let its submitted units run.

    Attributes:
        scheduler: The scheduler being exercised.
        run_until_idle: Blocks until every unit submitted so far has run.
        hold: Stops units submitted from now on from running until the
            returned event is set. Schedulers that only run units inside
            `run_until_idle` need no holding and return an unused event.
    """

    scheduler: TaskScheduler
    run_until_idle: Callable[[], None]
    hold: Callable[[], threading.Event] = threading.Event


@pytest.fixture(params=["thread", "manual", "asyncio"])
def scheduler_under_test(request: pytest.FixtureRequest) -> Iterator[SchedulerUnderTest]:
    """Yield a fresh scheduler for the requested backend.

    Supported params:
      - `"thread"` → SerialThreadScheduler
      - `"manual"` → ManualScheduler
      - `"asyncio"` → AsyncioScheduler on a private event loop
    """

    match request.param:
        case "thread":
            with SerialThreadScheduler() as thread_scheduler:

                def _wait() -> None:
                    assert thread_scheduler.wait_idle(timeout=RUN_TIMEOUT)

                def _hold() -> threading.Event:
                    gate = threading.Event()
                    thread_scheduler.submit(lambda: gate.wait(RUN_TIMEOUT))
                    return gate

                yield SchedulerUnderTest(thread_scheduler, _wait, _hold)
        case "manual":
            manual = ManualScheduler()

            def _run_all() -> None:
                while manual.run_pending():
                    pass

            yield SchedulerUnderTest(manual, _run_all)
        case "asyncio":
            loop = asyncio.new_event_loop()

            def _spin() -> None:
                # a few turns so callbacks scheduled by callbacks also run
                for _ in range(3):
                    loop.run_until_complete(asyncio.sleep(0))

            try:
                yield SchedulerUnderTest(AsyncioScheduler(loop), _spin)
            finally:
                loop.close()
        case _:
            raise ValueError(f"unknown scheduler type: {request.param}")
