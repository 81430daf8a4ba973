"""Bootstrap the item queue service with its scheduler."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from itemqueue import __version__, config
from itemqueue.adapters.schedulers import ManualScheduler, SerialThreadScheduler
from itemqueue.interfaces.scheduler import TaskScheduler
from itemqueue.logging import configure_logging, log_startup
from itemqueue.service_layer import ItemQueueService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application objects."""

    service: ItemQueueService
    scheduler: TaskScheduler


def build_scheduler(kind: str) -> TaskScheduler:
    """Build a new scheduler of the given kind ("thread" or "manual")."""
    match kind:
        case "thread":
            return SerialThreadScheduler()
        case "manual":
            return ManualScheduler()
        case _:
            raise config.UnknownSchedulerError(kind)


def build_service(scheduler: TaskScheduler) -> ItemQueueService:
    """Build an item queue service that defers drains to `scheduler`."""
    return ItemQueueService(scheduler)


def bootstrap(configure_logs: bool = False) -> AppContainer:
    """Build the service and scheduler from environment configuration.

    Args:
        configure_logs: Install the Rich console handler at the configured
            level before wiring anything.
    """
    kind = config.get_scheduler_kind()
    if configure_logs:
        level = config.get_log_level()
        configure_logging(level=level)
        log_startup(logger, app_version=__version__, level=level, scheduler_kind=kind)

    scheduler = build_scheduler(kind)
    return AppContainer(service=build_service(scheduler), scheduler=scheduler)
