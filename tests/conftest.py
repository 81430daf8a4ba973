"""Global pytest fixtures for ITEMQUEUE.

Default layer marks (`unit`, `contract`, `integration`) are added by the
conftest of each layer folder.
"""

from __future__ import annotations

import pytest

from itemqueue.adapters.schedulers import ManualScheduler
from itemqueue.service_layer import ItemQueueService

# pylint: disable=redefined-outer-name


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    """A scheduler whose units only run when the test says so."""
    return ManualScheduler()


@pytest.fixture
def service(manual_scheduler: ManualScheduler) -> ItemQueueService:
    """A fresh, empty service driven by `manual_scheduler`."""
    return ItemQueueService(manual_scheduler)


@pytest.fixture
def seeded_service(service: ItemQueueService) -> ItemQueueService:
    """A service holding the items A, B and C, in that order."""
    for item in ("A", "B", "C"):
        service.add(item)
    return service
